"""Core scaffolding operations and configuration exports."""

from .config import (
    DEFAULT_COMMIT_MESSAGE,
    DEFAULT_REGISTRY,
    YARN_EXECUTABLE,
    ScaffoldConfig,
    get_template_root,
)
from .errors import InstallerNotFoundError, PackageInstallError, ScaffoldError
from .fs_ops import check_folder_exist, sync_folder
from .git_ops import GitInitResult, GitInitStatus, create_git_repo, is_git_repo
from .metadata import CustomizedInfo, build_readme_info, update_package_info
from .paths import PathResolver
from .yarn import (
    OutputSink,
    check_yarn_exist,
    check_yarn_use_default_registry,
    install_packages_by_yarn,
)

__all__ = [
    "DEFAULT_COMMIT_MESSAGE",
    "DEFAULT_REGISTRY",
    "YARN_EXECUTABLE",
    "CustomizedInfo",
    "GitInitResult",
    "GitInitStatus",
    "InstallerNotFoundError",
    "OutputSink",
    "PackageInstallError",
    "PathResolver",
    "ScaffoldConfig",
    "ScaffoldError",
    "build_readme_info",
    "check_folder_exist",
    "check_yarn_exist",
    "check_yarn_use_default_registry",
    "create_git_repo",
    "get_template_root",
    "install_packages_by_yarn",
    "is_git_repo",
    "sync_folder",
    "update_package_info",
]
