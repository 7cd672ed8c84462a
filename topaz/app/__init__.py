"""Application composition layer.

The command surface, UI dispatcher and Tk runtime in this package wire views,
view models, adapters and use cases into a runnable editor shell without
placing business logic in views.
"""
