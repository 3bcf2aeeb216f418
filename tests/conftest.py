from __future__ import annotations

from pathlib import Path

import pytest

from option_grammar import customize


@pytest.fixture
def describe_instances():
    """An operation schema with every composite shape."""
    return customize(None, [
        {"InstanceId": [{"membered_list": ["string"]}]},
        {"Filter": [{"membered_list": [{"structure": {
            "Name": ["string", "required"],
            "Value": [{"membered_list": ["string"]}],
        }}]}]},
        {"MaxResults": ["integer"]},
        {"DryRun": ["boolean"]},
    ])


@pytest.fixture
def write_catalog(tmp_path):
    def _write(content: str, name: str = "ec2.catalog.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


EC2_CATALOG = """\
option_grammar_format: 1.0.0
name: ec2
operations:
  DescribeInstances:
    - InstanceId: [membered_list: [string]]
    - Filter:
        - membered_list:
            - structure:
                Name: [string, required]
                Value: [membered_list: [string]]
    - MaxResults: [integer]
  DescribeReservedInstances:
    base: DescribeInstances
    options:
      - OfferingType: [string]
      - MaxResults: [required]
  RunInstances:
    - ImageId: [string, required]
    - MinCount: [integer, required]
    - MaxCount: [integer, required]
    - UserData: [blob]
    - Monitoring:
        - structure:
            Enabled: [boolean, required]
"""


@pytest.fixture
def ec2_catalog_text():
    return EC2_CATALOG
