from flow_risk_analyzer.infrastructure.observability.logger_factory_service import (
    bind_correlation_id,
    configure_logging,
    get_logger,
)

__all__ = [
    "bind_correlation_id",
    "configure_logging",
    "get_logger",
]
