"""AWS and Kubernetes provider configuration."""

import pulumi
import pulumi_aws as aws
import pulumi_kubernetes as k8s

from lbstack.config import StackConfig


def default_tags(config: StackConfig) -> dict[str, str]:
    """Tags applied to every AWS resource in the stack."""
    return {
        "ManagedBy": "Pulumi",
        "Project": config.project_name,
        "Stack": config.stack_name,
        **config.tags,
    }


def create_aws_provider(config: StackConfig) -> aws.Provider:
    """Create the AWS provider for the configured region.

    Explicit provider so default tags reach every resource, including the
    ones created inside the awsx and eks components.
    """
    return aws.Provider(
        f"{config.demo_name}-aws",
        region=config.aws_region,
        default_tags=aws.ProviderDefaultTagsArgs(tags=default_tags(config)),
    )


def create_k8s_provider(
    name: str,
    kubeconfig: pulumi.Input[str],
    parent: pulumi.Resource,
) -> k8s.Provider:
    """Create Kubernetes provider from EKS kubeconfig.

    Args:
        name: Provider name prefix
        kubeconfig: EKS cluster kubeconfig (as JSON string)
        parent: Parent resource for dependency tracking
    """
    return k8s.Provider(
        f"{name}-k8s",
        kubeconfig=kubeconfig,
        opts=pulumi.ResourceOptions(parent=parent),
    )
