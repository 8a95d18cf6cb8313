"""In-process scripted framework for tests and offline runs.

The model is replaced by a responder callable or a list of recorded
responses. Everything else a run does (tool dispatch, sub-agent calls,
memory tools, approvals, streaming, eval events) is played out locally so
the benchmarks can be exercised without any provider.
"""

from __future__ import annotations

import asyncio
import inspect
import time
from datetime import datetime
from typing import Any, AsyncIterator, Awaitable, Callable, Optional, Union
from uuid import uuid4

from aigentbench.framework.base import AgentFramework, AgentRun, FrameworkError, RunTimeoutError
from aigentbench.framework.types import (
    AgentConfig,
    ApprovalEvent,
    ContentEvent,
    ErrorEvent,
    EvalEvent,
    Event,
    ModelResponse,
    Tool,
    ToolCall,
    ToolEvent,
)
from aigentbench.utils.logging import get_logger

logger = get_logger("framework.scripted")

ResponderResult = Union[ModelResponse, str]
Responder = Callable[
    [AgentConfig, list[dict[str, Any]], list[Tool]],
    Union[ResponderResult, Awaitable[ResponderResult]],
]


def split_chunks(content: str, parts: int = 3) -> list[str]:
    """Break content into roughly ``parts`` pieces to simulate streaming."""
    if not content:
        return []
    size = max(len(content) // parts, 1)
    return [content[i:i + size] for i in range(0, len(content), size)]


class ScriptedRun(AgentRun):
    """A run executed as an asyncio task against a scripted model."""

    def __init__(self, framework: "ScriptedFramework", agent: AgentConfig, prompt: str):
        self.run_id = uuid4().hex[:12]
        self.agent = agent
        self.prompt = prompt
        self.content = ""
        self.error: Optional[BaseException] = None
        self._framework = framework
        self._queue: asyncio.Queue[Optional[Event]] = asyncio.Queue()
        self._approvals: dict[str, asyncio.Future[bool]] = {}
        self._children: list[ScriptedRun] = []
        self._task = asyncio.create_task(self._execute())

    @property
    def done(self) -> bool:
        return self._task.done()

    @property
    def trace(self):
        if self.agent.trace is not None:
            return self.agent.trace
        if self.agent.session is not None:
            return self.agent.session.trace
        return None

    async def events(self) -> AsyncIterator[Event]:
        while True:
            event = await self._queue.get()
            if event is None:
                return
            yield event

    async def wait(self, timeout: Optional[float] = None) -> str:
        if self._task.cancelled():
            raise FrameworkError(f"run {self.run_id} was cancelled")
        try:
            await asyncio.wait_for(asyncio.shield(self._task), timeout)
        except asyncio.TimeoutError:
            await self.cancel()
            raise RunTimeoutError(f"run {self.run_id} did not finish within {timeout}s")
        if self.error is not None:
            raise FrameworkError(str(self.error)) from self.error
        return self.content

    def approve(self, approval_id: str, approved: bool = True) -> None:
        """Resolve an approval requested by this run or by any sub-agent run below it."""
        owner = self._approval_owner(approval_id)
        if owner is None:
            raise FrameworkError(f"unknown approval id: {approval_id}")
        future = owner._approvals.pop(approval_id)
        if not future.done():
            future.set_result(approved)

    async def cancel(self) -> None:
        if self._task.done():
            return
        self._task.cancel()
        await asyncio.wait([self._task])
        # A task cancelled before its first step never closes the event stream
        self._queue.put_nowait(None)

    def _approval_owner(self, approval_id: str) -> Optional["ScriptedRun"]:
        if approval_id in self._approvals:
            return self
        for child in self._children:
            owner = child._approval_owner(approval_id)
            if owner is not None:
                return owner
        return None

    async def _emit(self, event: Event) -> None:
        await self._queue.put(event)

    def _record(self, kind: str, **data: Any) -> None:
        if self.trace is not None:
            self.trace.record(kind, run_id=self.run_id, agent=self.agent.name, **data)

    def _initial_messages(self) -> list[dict[str, Any]]:
        messages: list[dict[str, Any]] = []
        system_prompt = self.agent.system_prompt()
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        if self.agent.memory is not None:
            saved = self.agent.memory.content("session")
            if saved:
                messages.append({"role": "system", "content": f"Memory:\n{saved}"})
        for doc in self.agent.documents:
            if doc.is_text:
                body = doc.text()
            else:
                body = f"[{doc.mime_type} document, {len(doc.content)} bytes]"
            messages.append({"role": "user", "content": f"Attached file {doc.name}:\n{body}"})
        messages.append({"role": "user", "content": self.prompt})
        return messages

    async def _execute(self) -> None:
        tools = {tool.name: tool for tool in self._framework.tools_for(self.agent, parent=self)}
        messages = self._initial_messages()
        try:
            for sequence in range(self.agent.max_llm_calls):
                timestamp = datetime.utcnow()
                started = time.perf_counter()
                response = await self._framework.respond(self.agent, list(messages), list(tools.values()))
                duration = time.perf_counter() - started
                self._record("llm_call", sequence=sequence, response=response.to_dict())

                if self.agent.enable_evaluation:
                    await self._emit(EvalEvent(
                        run_id=self.run_id,
                        agent_name=self.agent.name,
                        sequence=sequence,
                        timestamp=timestamp,
                        duration=duration,
                        messages=list(messages),
                        response=response,
                    ))

                messages.append({
                    "role": "assistant",
                    "content": response.content,
                    "tool_calls": [t.to_dict() for t in response.tool_calls],
                })

                if not response.tool_calls:
                    await self._deliver(response.content)
                    return

                for call in response.tool_calls:
                    result = await self._call_tool(tools, call)
                    messages.append({
                        "role": "tool",
                        "tool_call_id": call.id,
                        "name": call.name,
                        "content": str(result),
                    })

            raise FrameworkError(
                f"agent {self.agent.name or 'unnamed'} exceeded {self.agent.max_llm_calls} LLM calls"
            )
        except Exception as e:
            logger.debug("run %s failed: %s", self.run_id, e)
            self.error = e
            self._record("error", error=str(e))
            await self._emit(ErrorEvent(run_id=self.run_id, agent_name=self.agent.name, err=e))
        finally:
            self._queue.put_nowait(None)

    async def _deliver(self, content: str) -> None:
        self.content = content
        self._record("content", content=content)
        if self.agent.stream:
            for chunk in split_chunks(content, self._framework.stream_parts):
                await self._emit(ContentEvent(run_id=self.run_id, agent_name=self.agent.name, content=chunk))
        else:
            await self._emit(ContentEvent(run_id=self.run_id, agent_name=self.agent.name, content=content))

    async def _call_tool(self, tools: dict[str, Tool], call: ToolCall) -> Any:
        tool = tools.get(call.name)
        if tool is None:
            message = f"unknown tool: {call.name}"
            await self._emit(ToolEvent(
                run_id=self.run_id, agent_name=self.agent.name,
                tool_name=call.name, args=call.args, error=message,
            ))
            return message

        if tool.require_approval:
            approval_id = uuid4().hex[:12]
            future: asyncio.Future[bool] = asyncio.get_running_loop().create_future()
            self._approvals[approval_id] = future
            await self._emit(ApprovalEvent(
                run_id=self.run_id, agent_name=self.agent.name,
                approval_id=approval_id, tool_name=call.name, args=call.args,
            ))
            if not await future:
                message = f"tool call {call.name} was not approved"
                await self._emit(ToolEvent(
                    run_id=self.run_id, agent_name=self.agent.name,
                    tool_name=call.name, args=call.args, error=message,
                ))
                return message

        result = tool.execute(call.args)
        if inspect.isawaitable(result):
            result = await result
        self._record("tool_call", tool=call.name, args=call.args, result=str(result))
        await self._emit(ToolEvent(
            run_id=self.run_id, agent_name=self.agent.name,
            tool_name=call.name, args=call.args, result=result,
        ))
        return result


class ScriptedFramework(AgentFramework):
    """
    Framework whose model is a script.

    Args:
        responder: Called with (agent, messages, tools) for every LLM call;
            may return a ModelResponse or plain text, sync or async
        responses: Recorded responses replayed in order across all runs
        stream_parts: Number of chunks streamed content is split into
    """

    name = "scripted"

    def __init__(
        self,
        responder: Optional[Responder] = None,
        responses: Optional[list[ResponderResult]] = None,
        stream_parts: int = 3,
    ):
        if responder is None and responses is None:
            raise FrameworkError("ScriptedFramework needs a responder or recorded responses")
        self.responder = responder
        self.responses = list(responses or [])
        self.stream_parts = stream_parts
        self.runs: list[ScriptedRun] = []
        self._replay_index = 0

    async def start(self, agent: AgentConfig, prompt: str) -> ScriptedRun:
        if agent.model is None:
            raise FrameworkError(f"agent {agent.name or 'unnamed'} has no model")
        run = ScriptedRun(self, agent, prompt)
        self.runs.append(run)
        return run

    async def respond(
        self,
        agent: AgentConfig,
        messages: list[dict[str, Any]],
        tools: list[Tool],
    ) -> ModelResponse:
        if self.responder is not None:
            result = self.responder(agent, messages, tools)
            if inspect.isawaitable(result):
                result = await result
        else:
            if self._replay_index >= len(self.responses):
                raise FrameworkError("no more recorded responses to replay")
            result = self.responses[self._replay_index]
            self._replay_index += 1

        if isinstance(result, str):
            return ModelResponse(content=result)
        return result

    def tools_for(self, agent: AgentConfig, parent: Optional[ScriptedRun] = None) -> list[Tool]:
        """Agent tools plus sub-agents and memory exposed as tools."""
        tools = list(agent.tools)
        for sub_agent in agent.agents:
            tools.append(self._sub_agent_tool(sub_agent, parent))
        if agent.memory is not None:
            tools.extend(self._memory_tools(agent))
        return tools

    def _sub_agent_tool(self, sub_agent: AgentConfig, parent: Optional[ScriptedRun] = None) -> Tool:
        async def call_agent(args: dict[str, Any]) -> str:
            run = await self.start(sub_agent, str(args.get("input", "")))
            if parent is None:
                return await run.wait(None)

            parent._children.append(run)
            try:
                # Content stays with the run that produced it; a failed
                # sub-agent surfaces as the parent's tool failure
                async for event in run.events():
                    if not isinstance(event, (ContentEvent, ErrorEvent)):
                        await parent._emit(event)
                return await run.wait(None)
            finally:
                await run.cancel()

        return Tool(
            name=sub_agent.name,
            description=sub_agent.description,
            execute=call_agent,
            input_schema={
                "type": "object",
                "properties": {"input": {"type": "string", "description": "Message for the agent"}},
                "required": ["input"],
            },
        )

    def _memory_tools(self, agent: AgentConfig) -> list[Tool]:
        memory = agent.memory

        def save_memory(args: dict[str, Any]) -> str:
            memory.save(str(args.get("content", "")), args.get("compartment", "session"))
            return "memory saved"

        def get_memory(args: dict[str, Any]) -> str:
            return memory.content(args.get("compartment", "session"))

        return [
            Tool(name="save_memory", description="Save content to memory", execute=save_memory),
            Tool(name="get_memory", description="Read saved memory", execute=get_memory),
        ]
