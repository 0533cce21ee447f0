"""EKS cluster with the AWS Load Balancer Controller, declared with Pulumi."""
