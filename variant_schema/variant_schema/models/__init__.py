"""Document-level models: the JSON value model and document loading.

Import submodules directly; this package re-exports nothing so that the engine
can depend on ``models.json_value`` without pulling in the loader.
"""
