"""Declarative option schemas for query-style service requests.

Schemas are built once from descriptor declarations, then used to validate
caller options and flatten them into ordered request parameters::

    from option_grammar import customize

    schema = customize(None, [
        {"Filter": [{"membered_list": [{"structure": {
            "Name": ["string", "required"],
            "Value": [{"membered_list": ["string"]}],
        }}]}]},
        {"MaxResults": ["integer"]},
    ])
    schema.request_params({"max_results": 10})
"""

# Catalog layout version understood by this library.
CATALOG_FORMAT_VERSION = "1.0.0"

from .descriptors import DescriptorKind, encode_blob  # noqa: E402
from .encoder import request_params  # noqa: E402
from .exceptions import (  # noqa: E402
    CatalogError,
    FormatError,
    FormatVersionError,
    MissingRequiredKeyError,
    MissingRequiredOptionError,
    OptionGrammarError,
    OptionValidationError,
    SchemaDefinitionError,
    UnexpectedKeyError,
    UnexpectedOptionError,
)
from .nodes import LeafType, ListKind, ScalarKind, SchemaNode, StructureKind  # noqa: E402
from .params import Param  # noqa: E402
from .schema import EMPTY_SCHEMA, Schema, customize  # noqa: E402
from .validator import validate  # noqa: E402

__all__ = [
    "CATALOG_FORMAT_VERSION",
    "CatalogError",
    "DescriptorKind",
    "EMPTY_SCHEMA",
    "FormatError",
    "FormatVersionError",
    "LeafType",
    "ListKind",
    "MissingRequiredKeyError",
    "MissingRequiredOptionError",
    "OptionGrammarError",
    "OptionValidationError",
    "Param",
    "ScalarKind",
    "Schema",
    "SchemaDefinitionError",
    "SchemaNode",
    "StructureKind",
    "UnexpectedKeyError",
    "UnexpectedOptionError",
    "customize",
    "encode_blob",
    "request_params",
    "validate",
]
