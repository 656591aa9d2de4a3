from flow_risk_analyzer.core.domain.risk_record import RiskRecord
from flow_risk_analyzer.core.domain.risk_shape import RiskShape
from flow_risk_analyzer.core.domain.source_file import SourceFile

__all__ = ["RiskRecord", "RiskShape", "SourceFile"]
