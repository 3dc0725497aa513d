"""
Exports públicos do módulo dispatch/chain.
"""

from dispatch.chain.pipeline import PipelineContext, build_pipeline

__all__ = [
    "PipelineContext",
    "build_pipeline",
]
