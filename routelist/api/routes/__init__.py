"""Route Modules: one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter; prefixes come from settings at
      registration time
    - Routes never contain store logic: they validate, delegate, translate
      absence into ResourceNotFoundError
"""
