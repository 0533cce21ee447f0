"""Shared pytest fixtures for the stack's tests.

This module provides common fixtures used across test files:
- pulumi_mocks: Pulumi mocks installed for the current test
- stack_config: StackConfig with sensible defaults
- policy_file: a minimal IAM policy document on disk
- stack_settings: stack config scoped to a single test
"""

import json
import pathlib
import typing

import pulumi
import pytest

from lbstack.config import NodeGroupSizing, StackConfig

# ============================================================================
# Pulumi Mock Fixtures
# ============================================================================


class StandardPulumiMocks(pulumi.runtime.Mocks):
    """Standard Pulumi mocks for testing Pulumi resources.

    Returns resource names as IDs and echoes back all inputs as outputs, with
    an ``arn`` added so dependent resources have something to reference.
    Every registered resource is recorded in ``resources`` by name and every
    invoke in ``calls``. Invoke results can be canned per token in
    ``call_results``, e.g. rendered manifests for ``kubernetes:helm:template``.
    """

    def __init__(self) -> None:
        super().__init__()
        self.resources: dict[str, pulumi.runtime.MockResourceArgs] = {}
        self.calls: list[pulumi.runtime.MockCallArgs] = []
        self.call_results: dict[str, dict[str, typing.Any]] = {}

    def new_resource(self, args: pulumi.runtime.MockResourceArgs) -> tuple[str | None, dict[typing.Any, typing.Any]]:
        """Mock resource creation - returns resource name as ID and inputs as outputs."""
        self.resources[args.name] = args
        outputs = dict(args.inputs)
        outputs.setdefault("arn", f"arn:aws:mock::123456789012:{args.name}")
        return args.name, outputs

    def call(
        self, args: pulumi.runtime.MockCallArgs
    ) -> dict[typing.Any, typing.Any] | tuple[dict[typing.Any, typing.Any], list[tuple[str, str]] | None]:
        """Mock function calls - returns the canned result for the token, or an empty dict."""
        self.calls.append(args)
        return self.call_results.get(args.token, {})


@pytest.fixture
def pulumi_mocks() -> StandardPulumiMocks:
    """Install standard Pulumi mocks for the current test and return them.

    Usage:
        @pulumi.runtime.test
        def test_my_resource(pulumi_mocks):
            # Resources created here are registered against the mocks
    """
    mocks = StandardPulumiMocks()
    pulumi.runtime.set_mocks(mocks, project="project", stack="stack", preview=False)
    return mocks


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def stack_config() -> StackConfig:
    """StackConfig matching the defaults of a freshly created stack."""
    return StackConfig(
        project_name="cloudnative-prague",
        stack_name="dev",
        aws_region="us-east-1",
        node_group=NodeGroupSizing(desired_capacity=2, min_size=1, max_size=3, instance_type="t2.small"),
    )


@pytest.fixture
def policy_file(tmp_path: pathlib.Path) -> pathlib.Path:
    """Write a minimal IAM policy document and return its path."""
    path = tmp_path / "iam_policy.json"
    path.write_text(
        json.dumps(
            {
                "Version": "2012-10-17",
                "Statement": [
                    {
                        "Effect": "Allow",
                        "Action": ["elasticloadbalancing:DescribeLoadBalancers"],
                        "Resource": "*",
                    }
                ],
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def stack_settings(monkeypatch: pytest.MonkeyPatch) -> typing.Callable[[dict[str, str]], None]:
    """Set Pulumi stack config for the current test only.

    Config is passed through ``PULUMI_CONFIG`` so it is discarded when the
    test finishes.

    Usage:
        def test_something(pulumi_mocks, stack_settings):
            stack_settings({"aws:region": "us-east-1"})
    """

    def apply(values: dict[str, str]) -> None:
        monkeypatch.setenv("PULUMI_CONFIG", json.dumps(values))

    return apply
