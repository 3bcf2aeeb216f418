# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Naming conventions shared by schemas, catalogs and the linter.

Wire names are the parameter names used by the remote service (``MaxResults``).
Binding names are the identifiers callers use for the same option
(``max_results``).
"""

import re
from functools import lru_cache

# Names the word splitter gets wrong; these must stay stable for existing callers.
_BINDING_NAME_EXCEPTIONS = {
    "ETag": "etag",
    "s3Bucket": "s3_bucket",
    "s3Key": "s3_key",
    "Ec2KeyName": "ec2_key_name",
    "Ec2SubnetId": "ec2_subnet_id",
    "Ec2VolumeId": "ec2_volume_id",
    "Ec2InstanceId": "ec2_instance_id",
    "ElastiCache": "elasticache",
    "NotificationARNs": "notification_arns",
}

_NAMESPACE_RE = re.compile(r"^.*:")
_ACRONYM_RE = re.compile(r"([A-Z0-9]+)([A-Z][a-z])")
_WORD_RE = re.compile(r"[a-z]+|\d+|[A-Z0-9]+[a-z]*")
_SEPARATOR_RE = re.compile(r"[-_]([a-zA-Z])")


@lru_cache(maxsize=1024)
def binding_name(wire_name: str) -> str:
    """Convert a wire name into the caller-facing binding name.

    Examples:
        ``MaxResults`` -> ``max_results``
        ``DBInstanceIdentifier`` -> ``db_instance_identifier``
        ``max_results`` -> ``max_results``
    """
    if wire_name in _BINDING_NAME_EXCEPTIONS:
        return _BINDING_NAME_EXCEPTIONS[wire_name]
    name = _NAMESPACE_RE.sub("", wire_name)
    name = _ACRONYM_RE.sub(r"\1_\2", name)
    return "_".join(_WORD_RE.findall(name)).lower()


def descriptor_key(token: str) -> str:
    """Convert a descriptor token into its registry key.

    ``list`` -> ``List``, ``membered_list`` and ``memberedList`` -> ``MemberedList``.
    """
    if not token:
        return token
    name = token[0].upper() + token[1:]
    return _SEPARATOR_RE.sub(lambda m: m.group(1).upper(), name)


def is_pascal_case(name: str) -> bool:
    """Check if a string is in PascalCase format (e.g. ``MaxResults``, ``Ec2KeyName``)."""
    if not name or not isinstance(name, str):
        return False
    return bool(re.match(r"^[A-Z][a-zA-Z0-9]*$", name))


def is_snake_case(name: str) -> bool:
    """Check if a string is in snake_case format (e.g. ``max_results``)."""
    if not name or not isinstance(name, str):
        return False
    return bool(re.match(r"^[a-z][a-z0-9_]*$", name))
