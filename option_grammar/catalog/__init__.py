"""Operation catalogs loaded from YAML files."""

from .loader import Catalog, CatalogLoader, catalog_loader, load_catalog
from .yaml_reader import YamlReader

__all__ = ["Catalog", "CatalogLoader", "YamlReader", "catalog_loader", "load_catalog"]
