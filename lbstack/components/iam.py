"""IAM role, policy and attachment for IRSA."""

import json

import pulumi
import pulumi_aws as aws

from lbstack.outputs import combine
from lbstack.policies import build_irsa_trust_policy, load_policy_document, service_account_subject


class IrsaRole(pulumi.ComponentResource):
    """IAM role assumable by a single Kubernetes service account.

    Creates:
    - Role trusting the cluster's OIDC provider for one service account subject
    - Managed policy loaded from a local JSON file
    - Attachment of that policy to the role

    The policy and attachment are children of the role so they are deleted
    before it.
    """

    def __init__(
        self,
        name: str,
        oidc_provider_arn: pulumi.Input[str],
        oidc_provider_url: pulumi.Input[str],
        namespace: str,
        service_account_name: str,
        policy_path: str,
        provider: aws.Provider,
        opts: pulumi.ResourceOptions | None = None,
    ):
        super().__init__("lbstack:infrastructure:IrsaRole", name, None, opts)

        self.subject = service_account_subject(namespace, service_account_name)
        pulumi.log.info(f"IRSA role {name} trusts service account subject {self.subject}")

        # Read eagerly so a bad file fails the pass before any resource is declared
        policy_document = load_policy_document(policy_path)

        self.role = aws.iam.Role(
            f"{name}-role",
            assume_role_policy=combine(
                lambda arn, url: json.dumps(build_irsa_trust_policy(arn, url, self.subject)),
                oidc_provider_arn,
                oidc_provider_url,
            ),
            opts=pulumi.ResourceOptions(parent=self, provider=provider),
        )

        role_opts = pulumi.ResourceOptions(parent=self.role, provider=provider)

        self.policy = aws.iam.Policy(
            f"{name}-policy",
            policy=policy_document,
            opts=role_opts,
        )

        self.attachment = aws.iam.RolePolicyAttachment(
            f"{name}-attachment",
            role=self.role.name,
            policy_arn=self.policy.arn,
            opts=role_opts,
        )

        self.role_arn = self.role.arn

        self.register_outputs(
            {
                "role_arn": self.role_arn,
                "policy_arn": self.policy.arn,
            }
        )
