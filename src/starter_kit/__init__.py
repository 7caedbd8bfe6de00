"""starter-kit: install starter kits into composer-managed projects.

Import from submodules:
- version: __version__
- installer: InstallRequest, StarterKitInstaller
- context: StarterKitContext, create_context
"""

from starter_kit.version import __version__ as __version__
