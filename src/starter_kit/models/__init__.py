"""Data models for starter-kit.

Import from submodules:
- config: KitConfig
- plan: CopyEntry, CopyPlan, EntryKind
- repository: RepositoryDescriptor
- result: DependencyFailure, InstallResult, InstallState
"""
