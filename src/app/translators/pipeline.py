"""Tradutor de eventos do Delivery Pipeline.

Payload esperado:
    {
        "event": "stageCompleted",
        "pipeline": {"id": "...", "name": "My Pipeline", "url": "https://..."},
        "stage": {"name": "Build"},
        "job": {"name": "Unit Tests"},           # apenas eventos de job
        "execution": {"number": 3, "status": "SUCCESS"}
    }
"""

from __future__ import annotations

from typing import Any

from app.domain.events import OutboundMessage
from app.protocols.event_translator import TranslationError

PIPELINE_USERNAME = "Pipeline"

STAGE_EVENTS = frozenset({"stageStarted", "stageCompleted"})
JOB_EVENTS = frozenset({"jobStarted", "jobCompleted"})

# Status de execução → rótulo exibido no Slack
STATUS_LABELS = {
    "SUCCESS": "PASSED",
    "FAILURE": "FAILED",
}


class PipelineEventTranslator:
    """Converte eventos de stage/job em mensagens Slack."""

    def translate(
        self,
        request_id: str,
        payload: Any,
        toolchain_credentials: Any,
    ) -> OutboundMessage | None:
        if not isinstance(payload, dict):
            raise TranslationError("invalid pipeline event payload: expected an object")

        event = payload.get("event")
        if event is not None and not isinstance(event, str):
            raise TranslationError("invalid pipeline event payload: event must be a string")
        if event not in STAGE_EVENTS and event not in JOB_EVENTS:
            return None

        pipeline = payload.get("pipeline")
        stage = payload.get("stage")
        if not isinstance(pipeline, dict) or not isinstance(stage, dict):
            raise TranslationError("invalid pipeline event payload: missing pipeline or stage")

        execution = payload.get("execution") if isinstance(payload.get("execution"), dict) else {}
        outcome = _outcome_label(event, execution)
        stage_ref = _stage_reference(stage, execution)
        pipeline_ref = _pipeline_reference(pipeline)

        if event in JOB_EVENTS:
            job = payload.get("job") if isinstance(payload.get("job"), dict) else {}
            job_name = job.get("name") or "unknown job"
            text = (
                f"Job *{job_name}* in stage {stage_ref} has *{outcome}* "
                f"in pipeline {pipeline_ref}"
            )
        else:
            text = f"Stage {stage_ref} has *{outcome}* in pipeline {pipeline_ref}"

        return OutboundMessage(username=PIPELINE_USERNAME, text=text)


def _outcome_label(event: str, execution: dict[str, Any]) -> str:
    if event.endswith("Started"):
        return "STARTED"
    status = str(execution.get("status") or "COMPLETED").upper()
    return STATUS_LABELS.get(status, status)


def _stage_reference(stage: dict[str, Any], execution: dict[str, Any]) -> str:
    name = stage.get("name") or "unknown stage"
    number = execution.get("number")
    return f"*{name}* #{number}" if number is not None else f"*{name}*"


def _pipeline_reference(pipeline: dict[str, Any]) -> str:
    name = pipeline.get("name") or pipeline.get("id") or "unknown pipeline"
    url = pipeline.get("url")
    # Link no formato mrkdwn do Slack
    return f"*<{url}|{name}>*" if url else f"*{name}*"
