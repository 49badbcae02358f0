"""
Agent platform: run the agent registered for a result type
"""
import asyncio
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Generic, Optional, Type, TypeVar
from uuid import uuid4

from storyshell.agents.base import AgentContext
from storyshell.agents.registry import AgentRegistry
from storyshell.core.exceptions import AgentExecutionError, AgentInvocationError
from storyshell.utils.logging import get_logger, log_error_with_context, log_performance_metric

logger = get_logger(__name__)

T = TypeVar("T")


def run_blocking(coro):
    """
    Run a coroutine to completion on a fresh event loop

    Unlike asyncio.run, the loop's thread pool is shut down without waiting,
    so a timed-out LLM call still running in a worker thread does not hold
    the caller past the timeout.
    """
    loop = asyncio.new_event_loop()
    executor = ThreadPoolExecutor(thread_name_prefix="storyshell")
    loop.set_default_executor(executor)
    try:
        return loop.run_until_complete(coro)
    finally:
        try:
            loop.run_until_complete(loop.shutdown_asyncgens())
        finally:
            executor.shutdown(wait=False)
            loop.close()


class AgentPlatform:
    """
    Runs one agent per request, chosen by the type of result asked for
    Any failure inside the agent surfaces as an AgentInvocationError
    """

    def __init__(self, registry: AgentRegistry, timeout: Optional[float] = None):
        self.registry = registry
        self.timeout = timeout

    async def invoke(self, result_type: Type[T], value: Any) -> T:
        """
        Run the agent that produces result_type on value

        Raises:
            AgentNotFoundError: If no agent produces result_type
            AgentExecutionError: If the agent fails, times out or returns the wrong type
        """
        agent = self.registry.create(result_type)
        context = AgentContext(session_id=uuid4().hex[:12])
        error_context = {
            "agent": agent.name,
            "result_type": result_type.__name__,
            "session_id": context.session_id,
        }

        logger.info(
            f"Invoking agent '{agent.name}' for {result_type.__name__}",
            extra={"session_id": context.session_id},
        )
        started = time.perf_counter()

        try:
            result = await asyncio.wait_for(agent.achieve(value, context), self.timeout)
        except AgentInvocationError as e:
            log_error_with_context(logger, e, error_context)
            raise
        except asyncio.TimeoutError as e:
            error = AgentExecutionError(agent.name, f"timed out after {self.timeout}s", e)
            log_error_with_context(logger, error, error_context)
            raise error from e
        except Exception as e:
            error = AgentExecutionError(agent.name, str(e), e)
            log_error_with_context(logger, error, error_context)
            raise error from e

        if not isinstance(result, result_type):
            error = AgentExecutionError(
                agent.name,
                f"produced {type(result).__name__}, expected {result_type.__name__}",
            )
            log_error_with_context(logger, error, error_context)
            raise error

        log_performance_metric(logger, f"agent:{agent.name}", time.perf_counter() - started, error_context)
        return result


class AgentInvocation(Generic[T]):
    """Programmatic, blocking invocation of the agent producing result_type"""

    def __init__(self, platform: AgentPlatform, result_type: Type[T]):
        self.platform = platform
        self.result_type = result_type

    @classmethod
    def create(cls, platform: AgentPlatform, result_type: Type[T]) -> "AgentInvocation[T]":
        return cls(platform, result_type)

    def invoke(self, value: Any) -> T:
        return run_blocking(self.invoke_async(value))

    async def invoke_async(self, value: Any) -> T:
        return await self.platform.invoke(self.result_type, value)
