"""AWS Load Balancer Controller installed from its Helm chart."""

import pulumi
import pulumi_kubernetes as k8s

from lbstack.transformations import remove_crd_status_field

CHART_NAME = "aws-load-balancer-controller"
ROLE_ARN_ANNOTATION = "eks.amazonaws.com/role-arn"


class LoadBalancerController(pulumi.ComponentResource):
    """Install the AWS Load Balancer Controller.

    The chart's own service account is disabled; the controller runs as a
    service account declared here and annotated with the IRSA role so the
    pods receive AWS credentials for that role.
    """

    def __init__(
        self,
        name: str,
        namespace: str,
        service_account_name: str,
        role_arn: pulumi.Input[str],
        cluster_name: pulumi.Input[str],
        vpc_id: pulumi.Input[str],
        region: str,
        stack_name: str,
        k8s_provider: k8s.Provider,
        chart_repo: str,
        chart_version: str | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ):
        super().__init__("lbstack:bootstrap:LoadBalancerController", name, None, opts)

        self.ns = k8s.core.v1.Namespace(
            f"{namespace}-ns",
            metadata=k8s.meta.v1.ObjectMetaArgs(
                name=namespace,
                labels={"app.kubernetes.io/name": CHART_NAME},
            ),
            opts=pulumi.ResourceOptions(parent=self, provider=k8s_provider),
        )
        self.namespace = self.ns.metadata.name

        self.service_account = k8s.core.v1.ServiceAccount(
            f"{name}-sa",
            metadata=k8s.meta.v1.ObjectMetaArgs(
                name=service_account_name,
                namespace=self.namespace,
                annotations={ROLE_ARN_ANNOTATION: role_arn},
            ),
            opts=pulumi.ResourceOptions(parent=self.ns, provider=k8s_provider),
        )

        self.chart = k8s.helm.v3.Chart(
            name,
            k8s.helm.v3.ChartOpts(
                chart=CHART_NAME,
                version=chart_version,
                fetch_opts=k8s.helm.v3.FetchOpts(repo=chart_repo),
                namespace=self.namespace,
                values={
                    "region": region,
                    "serviceAccount": {
                        "name": self.service_account.metadata.name,
                        "create": False,
                    },
                    "vpcId": vpc_id,
                    "clusterName": cluster_name,
                    "podLabels": {
                        "stack": stack_name,
                        "app": "aws-lb-controller",
                    },
                },
                transformations=[remove_crd_status_field],
            ),
            opts=pulumi.ResourceOptions(
                parent=self.ns, provider=k8s_provider, depends_on=[self.service_account]
            ),
        )

        self.register_outputs({"namespace": self.namespace})
