from typing import NamedTuple


class InstanceViewModel(NamedTuple):
    """Host metadata bound into rendered page templates"""

    ec2_instance_type: str
    os_arch: str
    is_graviton_instance: bool

    def as_template_context(self) -> dict:
        """Template variable names used by the page templates"""
        return {"ec2InstanceType": self.ec2_instance_type, "osArch": self.os_arch, "isGravitonInstance": self.is_graviton_instance}


def build_view_model(provider) -> InstanceViewModel:
    """Collect the provider values for a single page render"""
    return InstanceViewModel(
        ec2_instance_type=provider.get_instance_type(),
        os_arch=provider.get_architecture(),
        is_graviton_instance=provider.is_graviton_instance(),
    )
