from .lazy import LazySeq

__all__ = ("LazySeq",)
