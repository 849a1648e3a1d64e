"""Route List Application Package: editable, reorderable route table over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
