"""An agent summarising an attached document."""

from __future__ import annotations

import time
from typing import Optional

from aigentbench.core.results import (
    ResponseValidationError,
    create_bench_result,
    truncate_string,
    validate_response,
)
from aigentbench.core.types import BenchResult
from aigentbench.framework.base import AgentFramework, FrameworkError
from aigentbench.framework.types import AgentConfig, Document, ModelHandle
from aigentbench.scenarios.base import CapabilityRegistry, run_and_wait

SAMPLE_TEXT = (
    b"This is a test text file with some sample content for analysis. "
    b"The content includes information about artificial intelligence and machine learning."
)

PROMPT = (
    "Please analyze the attached file and tell me what it contains. If you are able to analyse the file, "
    "start your response with 'SUCCESS:' followed by the analysis."
)

EXPECTED_PREFIX = "SUCCESS:"
CONTENT_CHECKS = ["artificial intelligence", "machine learning", "sample content"]


def new_file_attachments_agent(framework: AgentFramework, model: ModelHandle) -> AgentConfig:
    return AgentConfig(
        name="file-analyst",
        model=model,
        description="You are a helpful assistant that analyzes text files and provides insights.",
        instructions=(
            "When you see a file reference, analyze it and provide a summary. "
            "If you cannot access the file, explain why."
        ),
        documents=[Document(name="sample.txt", content=SAMPLE_TEXT, mime_type="text/plain")],
        trace=framework.new_trace(),
    )


@CapabilityRegistry.register("FileAttachments", "Agent analyses an attached text document")
async def run_file_attachments(
    framework: AgentFramework,
    model: ModelHandle,
    timeout: Optional[float] = None,
) -> BenchResult:
    start = time.perf_counter()
    
    try:
        response = await run_and_wait(framework, new_file_attachments_agent(framework, model), PROMPT, timeout)
    except FrameworkError as e:
        return create_bench_result("FileAttachments", model, start, "", e)
    
    result = create_bench_result("FileAttachments", model, start, response)
    
    try:
        validate_response(response, EXPECTED_PREFIX)
    except ResponseValidationError as e:
        return result.fail(str(e))
    
    if not any(check.lower() in response.lower() for check in CONTENT_CHECKS):
        return result.fail("Response does not contain expected file content analysis")
    
    result.metadata["expected_prefix"] = EXPECTED_PREFIX
    result.metadata["content_checks"] = CONTENT_CHECKS
    result.metadata["response_preview"] = truncate_string(response, 150)
    return result
