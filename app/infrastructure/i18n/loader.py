"""Catalog loading interface and implementations.

Defines the contract for discovering catalog sources and provides a
directory-based loader (one file per language).
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Union

import structlog
from infrastructure.i18n.errors import EmptyCatalogError, LoadError
from infrastructure.i18n.models import Catalog, CatalogSource

logger = structlog.get_logger().bind(component="i18n.loader")


class CatalogLoader(ABC):
    """Abstract base for catalog loaders.

    Implementations decide where catalog sources come from; building the
    catalog from them is shared.
    """

    @abstractmethod
    def sources(self) -> List[CatalogSource]:
        """Discover catalog sources, one per language.

        Raises:
            LoadError: If the sources cannot be enumerated.
        """
        pass

    def load(self) -> Catalog:
        """Build a Catalog from every discovered source.

        Raises:
            LoadError: If a source cannot be read or parsed.
            EmptyCatalogError: If no source was found.
        """
        return Catalog.build(self.sources())


class DirectoryCatalogLoader(CatalogLoader):
    """Loader for a directory of per-language catalog files.

    Every regular file below ``lang_dir`` is a source; its name without the
    extension is the language identifier (e.g., ``zh-CN.json``). Files are
    visited in sorted order, so for duplicate languages the last one wins.

    Attributes:
        lang_dir: Directory containing the catalog files.
    """

    def __init__(self, lang_dir: Union[str, Path]):
        self.lang_dir = Path(lang_dir)

    def sources(self) -> List[CatalogSource]:
        if not self.lang_dir.is_dir():
            logger.error("lang_dir_not_found", lang_dir=str(self.lang_dir))
            raise LoadError(str(self.lang_dir), "language directory not found")

        return [
            CatalogSource(name=path.name, path=path)
            for path in sorted(self.lang_dir.rglob("*"))
            if path.is_file()
        ]

    def load(self) -> Catalog:
        sources = self.sources()
        try:
            catalog = Catalog.build(sources, location=str(self.lang_dir))
        except EmptyCatalogError:
            logger.error("no_language_files_found", lang_dir=str(self.lang_dir))
            raise
        except LoadError as e:
            logger.error(
                "catalog_source_load_failed",
                lang_dir=str(self.lang_dir),
                source=e.source,
                error=e.reason,
            )
            raise

        logger.info(
            "catalog_loaded",
            lang_dir=str(self.lang_dir),
            file_count=len(sources),
            languages=catalog.languages(),
        )
        return catalog
