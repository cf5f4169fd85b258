# pipelines/__init__.py
from pipelines.pipeline_parallel import ParallelPipeline, PipelineReport

__all__ = ['ParallelPipeline', 'PipelineReport']
