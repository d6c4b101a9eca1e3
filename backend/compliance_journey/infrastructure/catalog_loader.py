"""Catalog Loader — reads, validates and freezes the static catalog once per process.

Invariants:
    - get_catalog() is cached (lru_cache): one immutable ToolCatalog per process
    - Any load failure raises CatalogValidationError (fail fast, never a partial catalog)
    - Tolerated unknown prerequisites (strict_prerequisites=False) are logged as warnings

Design Decisions:
    - Bundled JSON read via importlib.resources: works from wheels and editable installs
    - pydantic validates file shape; build_catalog() validates the prerequisite graph
"""

import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path

from pydantic import ValidationError

from compliance_journey.config import get_settings
from compliance_journey.core.catalog import ToolCatalog, build_catalog
from compliance_journey.core.errors import CatalogFormatError
from compliance_journey.core.validate_catalog import find_unknown_prerequisites
from compliance_journey.schemas.catalog_config import CatalogConfig

logger = logging.getLogger(__name__)

BUNDLED_CATALOG = "catalog.json"


def read_catalog_source(path: str | None = None) -> tuple[str, str]:
    """Return (source_label, raw_json). path=None reads the bundled catalog."""
    if path is None:
        ref = resources.files("compliance_journey.data").joinpath(BUNDLED_CATALOG)
        return f"bundled:{BUNDLED_CATALOG}", ref.read_text(encoding="utf-8")
    try:
        return path, Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogFormatError(path, f"cannot read file ({e.strerror or e})") from e
    except UnicodeDecodeError as e:
        raise CatalogFormatError(path, f"not valid UTF-8 at byte {e.start}") from e


def parse_catalog_config(raw: str, source: str) -> CatalogConfig:
    """Parse and shape-validate raw JSON. Raises CatalogFormatError."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CatalogFormatError(source, f"invalid JSON at line {e.lineno}: {e.msg}") from e
    try:
        return CatalogConfig.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(loc) for loc in first["loc"])
        raise CatalogFormatError(
            source, f"{e.error_count()} schema error(s), first at {where}: {first['msg']}",
        ) from e


def catalog_from_config(
    config: CatalogConfig, *, strict_prerequisites: bool = True,
) -> ToolCatalog:
    """Convert parsed config into a validated, frozen ToolCatalog."""
    tools = [t.to_domain() for t in config.tools]
    catalog = build_catalog(
        [p.to_domain() for p in config.phases],
        tools,
        [j.to_domain() for j in config.persona_journeys],
        strict_prerequisites=strict_prerequisites,
    )
    if not strict_prerequisites:
        for tool_id, missing in find_unknown_prerequisites(tools).items():
            logger.warning(
                f"Tool {tool_id} has unknown prerequisites {missing}; it stays locked",
                extra={"tool_id": tool_id},
            )
    return catalog


def load_catalog(
    path: str | None = None, *, strict_prerequisites: bool = True,
) -> ToolCatalog:
    """Read + parse + validate a catalog file. Raises CatalogValidationError."""
    source, raw = read_catalog_source(path)
    config = parse_catalog_config(raw, source)
    catalog = catalog_from_config(config, strict_prerequisites=strict_prerequisites)
    logger.info(
        f"Catalog loaded from {source} (version {config.version})",
        extra={"tool_count": len(catalog.tools)},
    )
    return catalog


@lru_cache
def get_catalog() -> ToolCatalog:
    """Process-wide catalog, built on first use from settings."""
    settings = get_settings()
    return load_catalog(
        settings.catalog_path,
        strict_prerequisites=settings.strict_prerequisites,
    )
