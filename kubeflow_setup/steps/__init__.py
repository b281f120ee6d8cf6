from .step_10_install_microk8s import InstallMicroK8sStep
from .step_15_configure_user import ConfigureUserStep
from .step_20_wait_ready import WaitMicroK8sReadyStep
from .step_25_enable_addons import EnableAddonsStep
from .step_30_verify_microk8s import VerifyMicroK8sStep
from .step_40_install_juju import InstallJujuStep
from .step_45_add_k8s_cloud import AddK8sCloudStep
from .step_50_bootstrap_controller import BootstrapControllerStep
from .step_55_create_model import CreateModelStep
from .step_60_configure_system import ConfigureSystemStep
from .step_70_deploy_kubeflow import DeployKubeflowStep
from .step_80_setup_data_disk import SetupDataDiskStep

__all__ = [
    "InstallMicroK8sStep",
    "ConfigureUserStep",
    "WaitMicroK8sReadyStep",
    "EnableAddonsStep",
    "VerifyMicroK8sStep",
    "InstallJujuStep",
    "AddK8sCloudStep",
    "BootstrapControllerStep",
    "CreateModelStep",
    "ConfigureSystemStep",
    "DeployKubeflowStep",
    "SetupDataDiskStep",
]
