from eleventy_gates.config import ScaffoldConfig, SiteLayout
from eleventy_gates.executor import NodeExecutor
from eleventy_gates.manifest import Manifest
from eleventy_gates.scaffold import ScaffoldReport, Scaffolder

__all__ = ("Manifest", "NodeExecutor", "ScaffoldConfig", "ScaffoldReport", "Scaffolder", "SiteLayout")
