from .lcg_generator import GeneratorParams, LCGGenerator, Sample

__all__ = ['GeneratorParams', 'LCGGenerator', 'Sample']
