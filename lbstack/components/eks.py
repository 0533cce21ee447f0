"""EKS cluster infrastructure."""

import json

import pulumi
import pulumi_aws as aws
import pulumi_eks as eks

from lbstack.config import NodeGroupSizing
from lbstack.outputs import assert_defined, require_output


def oidc_identity(core: pulumi.Input, name: str) -> tuple[pulumi.Output[str], pulumi.Output[str]]:
    """ARN and issuer URL of the OIDC provider in a cluster's core data.

    The provider only exists when the cluster was created with
    ``create_oidc_provider``; a missing provider fails the definition pass.
    """
    oidc_provider = pulumi.Output.from_input(core).apply(
        lambda c: assert_defined(c.oidc_provider, "oidc_provider")
    )
    arn = require_output(oidc_provider.apply(lambda p: p.arn), f"{name} oidc_provider.arn")
    url = require_output(oidc_provider.apply(lambda p: p.url), f"{name} oidc_provider.url")
    return arn, url


class EksCluster(pulumi.ComponentResource):
    """EKS cluster with a default node group and IRSA support.

    Creates:
    - EKS control plane in the given VPC
    - Default node group sized by ``node_group``
    - OIDC provider for IRSA (IAM Roles for Service Accounts)
    """

    def __init__(
        self,
        name: str,
        vpc_id: pulumi.Input[str],
        public_subnet_ids: pulumi.Input,
        node_group: NodeGroupSizing,
        provider: aws.Provider,
        opts: pulumi.ResourceOptions | None = None,
    ):
        super().__init__("lbstack:infrastructure:EksCluster", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self, provider=provider)

        self.cluster = eks.Cluster(
            name,
            vpc_id=vpc_id,
            public_subnet_ids=public_subnet_ids,
            node_group_options=eks.ClusterNodeGroupOptionsArgs(
                desired_capacity=node_group.desired_capacity,
                min_size=node_group.min_size,
                max_size=node_group.max_size,
                instance_type=node_group.instance_type,
            ),
            create_oidc_provider=True,
            opts=child_opts,
        )

        self.cluster_name = self.cluster.eks_cluster.name
        self.kubeconfig = self.cluster.kubeconfig.apply(lambda kc: json.dumps(kc))
        self.oidc_provider_arn, self.oidc_provider_url = oidc_identity(self.cluster.core, name)

        self.register_outputs(
            {
                "cluster_name": self.cluster_name,
                "kubeconfig": self.kubeconfig,
                "oidc_provider_arn": self.oidc_provider_arn,
                "oidc_provider_url": self.oidc_provider_url,
            }
        )
