import pulumi
import pulumi_aws as aws

from conftest import StandardPulumiMocks
from lbstack.components.storage import StorageBucket


@pulumi.runtime.test
def test_bucket_is_private_by_default(pulumi_mocks: StandardPulumiMocks) -> pulumi.Output[None]:
    _ = pulumi_mocks
    bucket = StorageBucket("my-bucket", provider=aws.Provider("test-aws", region="us-east-1"))

    assert bucket.acl is None

    def check(args: list) -> None:
        block_acls, ignore_acls, block_policy, restrict, tags = args
        assert block_acls is True
        assert ignore_acls is True
        assert block_policy is True
        assert restrict is True
        assert "PublicReadReason" not in tags

    block = bucket.public_access_block
    return pulumi.Output.all(
        block.block_public_acls,
        block.ignore_public_acls,
        block.block_public_policy,
        block.restrict_public_buckets,
        bucket.bucket.tags,
    ).apply(check)


@pulumi.runtime.test
def test_bucket_public_read_requires_reason(pulumi_mocks: StandardPulumiMocks) -> pulumi.Output[None]:
    _ = pulumi_mocks
    bucket = StorageBucket(
        "site-assets",
        provider=aws.Provider("test-aws", region="us-east-1"),
        public_read_reason="static website assets",
    )

    assert bucket.acl is not None

    def check(args: list) -> None:
        acl, block_acls, block_policy, tags = args
        assert acl == "public-read"
        assert block_acls is False
        assert block_policy is True
        assert tags["PublicReadReason"] == "static website assets"

    return pulumi.Output.all(
        bucket.acl.acl,
        bucket.public_access_block.block_public_acls,
        bucket.public_access_block.block_public_policy,
        bucket.bucket.tags,
    ).apply(check)


@pulumi.runtime.test
def test_bucket_empty_reason_stays_private(pulumi_mocks: StandardPulumiMocks) -> pulumi.Output[None]:
    _ = pulumi_mocks
    bucket = StorageBucket("my-bucket", provider=aws.Provider("test-aws", region="us-east-1"), public_read_reason="")

    assert bucket.acl is None

    def check(bucket_id: str) -> None:
        assert bucket_id == "my-bucket"

    return bucket.bucket_id.apply(check)
