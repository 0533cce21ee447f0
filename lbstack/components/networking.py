"""VPC and networking infrastructure for the cluster."""

import pulumi
import pulumi_aws as aws
import pulumi_awsx as awsx


class Networking(pulumi.ComponentResource):
    """VPC and networking infrastructure.

    Creates:
    - VPC with specified CIDR
    - Public subnets (for internet-facing load balancers and nodes)
    - Private subnets (for internal load balancers)
    - NAT gateways, internet gateway and route tables (awsx defaults)
    """

    def __init__(
        self,
        name: str,
        vpc_cidr: str,
        project_name: str,
        provider: aws.Provider,
        opts: pulumi.ResourceOptions | None = None,
    ):
        super().__init__("lbstack:infrastructure:Networking", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self, provider=provider)

        # Role tags let the load balancer controller discover subnets
        self.vpc = awsx.ec2.Vpc(
            name,
            cidr_block=vpc_cidr,
            subnet_specs=[
                awsx.ec2.SubnetSpecArgs(
                    type=awsx.ec2.SubnetType.PUBLIC,
                    tags={"kubernetes.io/role/elb": "1"},
                ),
                awsx.ec2.SubnetSpecArgs(
                    type=awsx.ec2.SubnetType.PRIVATE,
                    tags={"kubernetes.io/role/internal-elb": "1"},
                ),
            ],
            tags={
                "Name": project_name,
            },
            opts=child_opts,
        )

        self.vpc_id = self.vpc.vpc_id
        self.public_subnet_ids = self.vpc.public_subnet_ids
        self.private_subnet_ids = self.vpc.private_subnet_ids

        self.register_outputs(
            {
                "vpc_id": self.vpc_id,
                "public_subnet_ids": self.public_subnet_ids,
                "private_subnet_ids": self.private_subnet_ids,
            }
        )
