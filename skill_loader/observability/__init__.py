"""Observability module for audit logging."""

from skill_loader.observability.audit import AuditSink, JSONLAuditSink, StderrAuditSink

__all__ = ["AuditSink", "JSONLAuditSink", "StderrAuditSink"]
