"""Transformations applied to Kubernetes resources rendered from Helm charts."""

from collections.abc import Sequence
from typing import Any

import pulumi

CRD_TYPE = "kubernetes:apiextensions.k8s.io/v1:CustomResourceDefinition"
CRD_STATUS_PATH = ("spec", "versions", "*", "subresources", "status")

WILDCARD = "*"


def remove_key_path(tree: Any, path: Sequence[str]) -> Any:
    """Return ``tree`` without the key at ``path``.

    ``"*"`` matches every element of a list. Branches that do not have the
    expected shape are left alone. The input is never mutated: nodes along
    the path are rebuilt, everything else is shared. If nothing is removed
    the original object is returned.
    """
    if not path:
        return tree

    head, rest = path[0], path[1:]

    if head == WILDCARD:
        if not isinstance(tree, list):
            return tree
        items = [remove_key_path(item, rest) for item in tree]
        if all(new is old for new, old in zip(items, tree)):
            return tree
        return items

    if not isinstance(tree, dict) or head not in tree:
        return tree

    if not rest:
        return {k: v for k, v in tree.items() if k != head}

    child = remove_key_path(tree[head], rest)
    if child is tree[head]:
        return tree
    return {**tree, head: child}


def strip_crd_status_subresource(resource_type: str, props: dict[str, Any]) -> dict[str, Any]:
    """Drop ``spec.versions[*].subresources.status`` from a CRD.

    Any other resource type is returned as-is. Applying this twice is the
    same as applying it once.
    """
    if resource_type != CRD_TYPE:
        return props
    return remove_key_path(props, CRD_STATUS_PATH)


def manifest_type(obj: dict[str, Any]) -> str:
    """Pulumi type token for a rendered Kubernetes manifest."""
    return f"kubernetes:{obj.get('apiVersion', '')}:{obj.get('kind', '')}"


def remove_crd_status_field(obj: dict[str, Any], _: pulumi.ResourceOptions) -> None:
    """Chart transformation removing the status subresource from CRDs.

    Helm chart transformations edit the manifest in place, so ``obj`` is only
    rewritten when something was actually removed.
    """
    stripped = strip_crd_status_subresource(manifest_type(obj), obj)
    if stripped is obj:
        return
    pulumi.log.debug(f"Removed status subresource from CRD {obj.get('metadata', {}).get('name')}")
    obj.clear()
    obj.update(stripped)
