import pytest
from samples import make_metrics

from ai_text_detector.data_models import AnalysisMetrics


@pytest.fixture
def neutral_metrics() -> AnalysisMetrics:
    return make_metrics()
