from services.analyzer_service import DependencyAnalyzerService
from services.sample_data import load_sample_dataset

__all__ = ["DependencyAnalyzerService", "load_sample_dataset"]
