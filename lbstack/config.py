"""Stack configuration schema and loader."""

from dataclasses import dataclass, field

import pulumi

from lbstack.errors import ConfigurationError

DEMO_NAME = "cn-prague"


@dataclass(frozen=True)
class NodeGroupSizing:
    """Sizing of the cluster's default node group."""

    desired_capacity: int = 2
    min_size: int = 1
    max_size: int = 3
    instance_type: str = "t2.small"

    def __post_init__(self) -> None:
        if self.min_size < 1:
            raise ConfigurationError("minSize", f"minSize must be at least 1, got {self.min_size}", self.min_size)
        if self.min_size > self.max_size:
            raise ConfigurationError(
                "minSize",
                f"minSize ({self.min_size}) must not exceed maxSize ({self.max_size})",
                self.min_size,
            )
        if not self.min_size <= self.desired_capacity <= self.max_size:
            raise ConfigurationError(
                "desiredCapacity",
                f"desiredCapacity ({self.desired_capacity}) must be within "
                f"[minSize, maxSize] = [{self.min_size}, {self.max_size}]",
                self.desired_capacity,
            )
        if not self.instance_type:
            raise ConfigurationError("instanceType", "instanceType must not be empty", self.instance_type)


@dataclass(frozen=True)
class StackConfig:
    """Configuration for the whole stack, built once at program entry."""

    # Identity
    project_name: str
    stack_name: str
    aws_region: str
    demo_name: str = DEMO_NAME

    # Networking and cluster
    vpc_cidr: str = "10.0.0.0/16"
    node_group: NodeGroupSizing = field(default_factory=NodeGroupSizing)

    # AWS Load Balancer Controller
    lb_namespace: str = "aws-lb-controller"
    lb_service_account: str = "aws-lb-controller-serviceaccount"
    iam_policy_path: str = "iam_policy.json"
    chart_repo: str = "https://aws.github.io/eks-charts"
    chart_version: str | None = None

    # Storage
    bucket_name: str = "my-bucket"
    bucket_public_read_reason: str | None = None

    tags: dict[str, str] = field(default_factory=dict)


def load_stack_config() -> StackConfig:
    """Load and validate stack configuration from Pulumi stack config."""
    config = pulumi.Config()
    aws_config = pulumi.Config("aws")

    # Explicit zeros must reach validation rather than fall back to defaults
    defaults = NodeGroupSizing()
    desired_capacity = config.get_int("desiredCapacity")
    min_size = config.get_int("minSize")
    max_size = config.get_int("maxSize")
    node_group = NodeGroupSizing(
        desired_capacity=defaults.desired_capacity if desired_capacity is None else desired_capacity,
        min_size=defaults.min_size if min_size is None else min_size,
        max_size=defaults.max_size if max_size is None else max_size,
        instance_type=config.get("instanceType") or defaults.instance_type,
    )

    stack_config = StackConfig(
        project_name=pulumi.get_project(),
        stack_name=pulumi.get_stack(),
        aws_region=aws_config.require("region"),
        vpc_cidr=config.get("vpcCidr") or "10.0.0.0/16",
        node_group=node_group,
        lb_namespace=config.get("lbNamespace") or "aws-lb-controller",
        lb_service_account=config.get("lbServiceAccount") or "aws-lb-controller-serviceaccount",
        iam_policy_path=config.get("iamPolicyPath") or "iam_policy.json",
        chart_repo=config.get("chartRepo") or "https://aws.github.io/eks-charts",
        chart_version=config.get("chartVersion"),
        bucket_name=config.get("bucketName") or "my-bucket",
        bucket_public_read_reason=config.get("bucketPublicReadReason"),
        tags=config.get_object("tags") or {},
    )

    pulumi.log.info(
        f"Loaded config for {stack_config.project_name}/{stack_config.stack_name} "
        f"in {stack_config.aws_region}: vpc {stack_config.vpc_cidr}, "
        f"nodes {node_group.min_size}/{node_group.desired_capacity}/{node_group.max_size} "
        f"x {node_group.instance_type}"
    )
    return stack_config
