from properties.generators import (
    GeneratorConfig,
    GeneratorMode,
    SequenceGenerator,
    SimilarSequenceGenerator,
    EdgeCaseGenerator,
    ComparisonCase,
    CaseGenerator,
)


__all__ = [
    "GeneratorConfig",
    "GeneratorMode",
    "SequenceGenerator",
    "SimilarSequenceGenerator",
    "EdgeCaseGenerator",
    "ComparisonCase",
    "CaseGenerator",
]
