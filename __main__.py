"""EKS + AWS Load Balancer Controller - Main entry point for Pulumi infrastructure deployment."""

import pulumi

from lbstack.components.eks import EksCluster
from lbstack.components.iam import IrsaRole
from lbstack.components.lb_controller import LoadBalancerController
from lbstack.components.networking import Networking
from lbstack.components.storage import StorageBucket
from lbstack.config import load_stack_config
from lbstack.providers import create_aws_provider, create_k8s_provider

# Load stack configuration once and thread it through every component
config = load_stack_config()

aws_provider = create_aws_provider(config)

# 1. Networking (VPC, subnets)
networking = Networking(
    name=config.demo_name,
    vpc_cidr=config.vpc_cidr,
    project_name=config.project_name,
    provider=aws_provider,
)

# 2. EKS cluster with OIDC provider for IRSA
eks_cluster = EksCluster(
    name=config.demo_name,
    vpc_id=networking.vpc_id,
    public_subnet_ids=networking.public_subnet_ids,
    node_group=config.node_group,
    provider=aws_provider,
)

# 3. IAM role for the load balancer controller's service account
lb_role = IrsaRole(
    name="aws-loadbalancer-controller",
    oidc_provider_arn=eks_cluster.oidc_provider_arn,
    oidc_provider_url=eks_cluster.oidc_provider_url,
    namespace=config.lb_namespace,
    service_account_name=config.lb_service_account,
    policy_path=config.iam_policy_path,
    provider=aws_provider,
)

# 4. Kubernetes provider from EKS kubeconfig
k8s_provider = create_k8s_provider(
    name=config.demo_name,
    kubeconfig=eks_cluster.kubeconfig,
    parent=eks_cluster,
)

# 5. Namespace, service account and Helm chart
lb_controller = LoadBalancerController(
    name="lb",
    namespace=config.lb_namespace,
    service_account_name=config.lb_service_account,
    role_arn=lb_role.role_arn,
    cluster_name=eks_cluster.cluster_name,
    vpc_id=networking.vpc_id,
    region=config.aws_region,
    stack_name=config.stack_name,
    k8s_provider=k8s_provider,
    chart_repo=config.chart_repo,
    chart_version=config.chart_version,
)

# Standalone bucket
bucket = StorageBucket(
    name=config.bucket_name,
    provider=aws_provider,
    public_read_reason=config.bucket_public_read_reason,
)

# Exports
pulumi.export("kubeconfig", pulumi.Output.secret(eks_cluster.kubeconfig))
pulumi.export("bucket_name", bucket.bucket_id)
pulumi.export("vpc_id", networking.vpc_id)
pulumi.export("cluster_name", eks_cluster.cluster_name)
pulumi.export("lb_controller_role_arn", lb_role.role_arn)
