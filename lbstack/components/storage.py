"""Standalone S3 bucket."""

import pulumi
import pulumi_aws as aws


class StorageBucket(pulumi.ComponentResource):
    """S3 bucket, private unless public read is explicitly justified.

    Public read needs ``public_read_reason``; the reason is logged and kept
    as a tag on the bucket.
    """

    def __init__(
        self,
        name: str,
        provider: aws.Provider,
        public_read_reason: str | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ):
        super().__init__("lbstack:infrastructure:StorageBucket", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self, provider=provider)
        public_read = bool(public_read_reason)

        tags = {"Name": name}
        if public_read:
            pulumi.log.warn(f"Bucket {name} allows public read: {public_read_reason}")
            tags["PublicReadReason"] = public_read_reason

        self.bucket = aws.s3.Bucket(name, tags=tags, opts=child_opts)

        self.public_access_block = aws.s3.BucketPublicAccessBlock(
            f"{name}-public-access",
            bucket=self.bucket.id,
            block_public_acls=not public_read,
            ignore_public_acls=not public_read,
            block_public_policy=True,
            restrict_public_buckets=not public_read,
            opts=child_opts,
        )

        self.acl: aws.s3.BucketAclV2 | None = None
        if public_read:
            ownership = aws.s3.BucketOwnershipControls(
                f"{name}-ownership",
                bucket=self.bucket.id,
                rule=aws.s3.BucketOwnershipControlsRuleArgs(object_ownership="BucketOwnerPreferred"),
                opts=child_opts,
            )
            self.acl = aws.s3.BucketAclV2(
                f"{name}-acl",
                bucket=self.bucket.id,
                acl="public-read",
                opts=pulumi.ResourceOptions(
                    parent=self, provider=provider, depends_on=[ownership, self.public_access_block]
                ),
            )

        self.bucket_id = self.bucket.id

        self.register_outputs({"bucket_id": self.bucket_id})
