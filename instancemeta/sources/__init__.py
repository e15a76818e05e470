from .aws.ec2 import get_instance_type as get_instance_type_from_metadata
from .host import get_architecture, get_instance_type_from_environment

# source name -> (callable, cacheable)
INSTANCE_TYPE_SOURCES = {
    "metadata": (get_instance_type_from_metadata, True),
    "environment": (get_instance_type_from_environment, False),
    "architecture": (get_architecture, True),
}
