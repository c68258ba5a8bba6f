from . import bigmodel_rest

__all__ = ["bigmodel_rest"]
