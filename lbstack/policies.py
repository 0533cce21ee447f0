"""IAM policy documents for IAM Roles for Service Accounts (IRSA)."""

import json
from pathlib import Path
from typing import Any

import pulumi

from lbstack.errors import ConfigurationError, PolicyDocumentError

POLICY_VERSION = "2012-10-17"


def service_account_subject(namespace: str, name: str) -> str:
    """OIDC ``sub`` claim that EKS issues for a Kubernetes service account."""
    if not namespace:
        raise ConfigurationError("namespace", "service account namespace must not be empty", namespace)
    if not name:
        raise ConfigurationError("name", "service account name must not be empty", name)
    return f"system:serviceaccount:{namespace}:{name}"


def build_irsa_trust_policy(oidc_arn: str, oidc_url: str, subject: str) -> dict[str, Any]:
    """Build a trust policy letting one service account assume a role.

    The role may only be assumed through ``oidc_arn`` by callers whose OIDC
    ``sub`` claim equals ``subject`` exactly.

    Args:
        oidc_arn: ARN of the cluster's IAM OIDC provider
        oidc_url: Issuer URL of the provider, with or without ``https://``
        subject: Service account subject, see :func:`service_account_subject`
    """
    issuer = oidc_url.removeprefix("https://")
    return {
        "Version": POLICY_VERSION,
        "Statement": [
            {
                "Effect": "Allow",
                "Principal": {"Federated": oidc_arn},
                "Action": "sts:AssumeRoleWithWebIdentity",
                "Condition": {
                    "StringEquals": {
                        f"{issuer}:sub": subject,
                    }
                },
            }
        ],
    }


def load_policy_document(path: str | Path) -> str:
    """Read an IAM policy document from disk, validate it and return it verbatim."""
    policy_path = Path(path)
    try:
        content = policy_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise PolicyDocumentError(str(policy_path), f"policy document is not valid UTF-8: {e}") from e
    except OSError as e:
        raise PolicyDocumentError(str(policy_path), f"cannot read policy document: {e.strerror or e}") from e

    try:
        document = json.loads(content)
    except json.JSONDecodeError as e:
        msg = f"malformed JSON at line {e.lineno} column {e.colno}: {e.msg}"
        raise PolicyDocumentError(str(policy_path), msg) from e

    if not isinstance(document, dict) or "Statement" not in document:
        raise PolicyDocumentError(str(policy_path), "policy document must be an object with a 'Statement' key")

    pulumi.log.debug(f"Loaded IAM policy document {policy_path} ({len(content)} bytes)")
    return content
