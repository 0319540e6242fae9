"""Default configuration values for findingdeck."""

import logging

from findingdeck.models.record import SectionLabel, Severity

logger = logging.getLogger(__name__)


# Corpus loading defaults
DEFAULT_LOADER_CONFIG: dict[str, str | float | int] = {
    "corpus_source": "hallazgos.md",
    "load_timeout": 1.0,  # seconds
    "tab_count": 10,
    "list_majority": 0.5,
    "page_title": "Hallazgos",
}

# "# Hallazgo 12: Título", "## Finding #3: Title"
DEFAULT_RECORD_HEADING_PATTERN = (
    r"^[ \t]{0,3}#{1,2}[ \t]*(?:Hallazgo|Finding|Problema|Issue)[ \t]*#?[ \t]*"
    r"(?P<ordinal>[^\s:]+)[ \t]*:[ \t]*(?P<title>.*?)[ \t]*$"
)

# Heading aliases per section; the first entry is the display heading
DEFAULT_SECTION_ALIASES: dict[SectionLabel, tuple[str, ...]] = {
    SectionLabel.DESCRIPTION: (
        "Descripción",
        "Descripción del problema",
        "Description",
        "Problem description",
    ),
    SectionLabel.PROBLEMATIC_EXAMPLE: (
        "Ejemplo problemático",
        "Ejemplo del problema",
        "Código problemático",
        "Ejemplo",
        "Problematic example",
        "Example",
    ),
    SectionLabel.CONSEQUENCES: (
        "Consecuencias",
        "Consequences",
    ),
    SectionLabel.MAINTENANCE_IMPACT: (
        "Impacto en el mantenimiento",
        "Impacto en mantenimiento",
        "Impacto en la mantenibilidad",
        "Maintenance impact",
    ),
    SectionLabel.RECOMMENDED_SOLUTION: (
        "Solución recomendada",
        "Solución propuesta",
        "Solución",
        "Recommended solution",
        "Solution",
    ),
    SectionLabel.BENEFITS: (
        "Beneficios",
        "Beneficios de la solución",
        "Benefits",
    ),
    SectionLabel.CONCLUSION: (
        "Conclusión",
        "Conclusion",
    ),
}

# Inline annotation labels ("**Archivo:** `src/app.js`")
FILE_PATH_LABELS: tuple[str, ...] = ("Archivo", "Fichero", "Ruta", "File", "Path")

SEVERITY_LABELS: tuple[str, ...] = (
    "Severidad",
    "Impacto",
    "Nivel de impacto",
    "Gravedad",
    "Severity",
    "Impact",
)

PRINCIPAL_CONCERN_LABELS: tuple[str, ...] = (
    "Preocupación principal",
    "Principal preocupación",
    "Problema principal",
    "Principal concern",
    "Main concern",
)

# Checked in order; the first vocabulary with a contained term wins
SEVERITY_VOCABULARY: dict[Severity, tuple[str, ...]] = {
    Severity.HIGH: ("alto", "alta", "high", "critico", "critica", "critical"),
    Severity.MEDIUM: ("medio", "media", "moderado", "moderada", "medium", "moderate"),
    Severity.LOW: ("bajo", "baja", "low", "minor", "menor"),
}

SEVERITY_DISPLAY: dict[Severity, str] = {
    Severity.HIGH: "Alto",
    Severity.MEDIUM: "Medio",
    Severity.LOW: "Bajo",
}

PENDING_MESSAGE = "Cargando hallazgo..."
NO_RECORDS_MESSAGE = "No se encontraron hallazgos en el documento."


def section_aliases(
    extra: dict[SectionLabel, list[str]] | None = None,
) -> dict[SectionLabel, tuple[str, ...]]:
    """Merge configured heading aliases after the defaults.

    Args:
        extra: Additional headings per label, usually from the config file

    Returns:
        Mapping of every label to its alias tuple
    """
    merged = dict(DEFAULT_SECTION_ALIASES)
    for label, headings in (extra or {}).items():
        merged[label] = merged.get(label, ()) + tuple(headings)
        logger.debug(f"Added {len(headings)} heading alias(es) for {label.value}")
    return merged
