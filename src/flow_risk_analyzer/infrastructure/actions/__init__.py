from flow_risk_analyzer.infrastructure.actions.actions_toolkit import ActionsToolkit

__all__ = ["ActionsToolkit"]
