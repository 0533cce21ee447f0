"""Stack infrastructure components."""

from lbstack.components.eks import EksCluster
from lbstack.components.iam import IrsaRole
from lbstack.components.lb_controller import LoadBalancerController
from lbstack.components.networking import Networking
from lbstack.components.storage import StorageBucket

__all__ = ["Networking", "EksCluster", "IrsaRole", "LoadBalancerController", "StorageBucket"]
