"""findingdeck - turn a findings document into a tabbed viewer.

A findings document is a long Markdown-like text holding numbered records
("# Hallazgo 3: ..."), each with a description, a problematic example, its
consequences, the maintenance impact, a recommended solution, benefits and a
conclusion.

Main features:
- Tolerant record splitting and section location under heading drift
- Typed fragments for lists, code samples and narrative text
- Lazy, tab-driven presentation in the terminal or as a single HTML page
- Bounded remote loading with a local file fallback
"""

from findingdeck.lib.errors import ConfigError, CorpusLoadError, FindingDeckError
from findingdeck.lib.record_builder import RecordBuilder, build_records
from findingdeck.lib.record_splitter import RecordSplitter, split_records

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigError",
    "CorpusLoadError",
    "FindingDeckError",
    "RecordBuilder",
    "RecordSplitter",
    "build_records",
    "split_records",
]
