"""Operations for starter-kit.

Import from submodules:
- plan: plan_exports
- merge: apply_plan, clear_destination
- reconcile: reconcile_repositories
"""
