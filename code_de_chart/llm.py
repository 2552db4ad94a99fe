"""Completion client for the generative text service."""

import logging
from typing import Optional, Protocol, Union

from pydantic_ai import Agent
from pydantic_ai.models import Model

from .config import ModelConfig, get_model_config, get_model_name
from .models import Completion
from .prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class Completer(Protocol):
    """Anything that can turn a prompt into a Completion."""

    async def complete(self, prompt: str) -> Completion: ...


class ChartCompleter:
    """Plain-text completions through a pydantic-ai agent.

    The agent is built on first use so that constructing a completer never
    touches the network or requires credentials. Failures of any kind are
    reported as an unsuccessful Completion rather than raised.
    """

    def __init__(self, config: Optional[ModelConfig] = None, model: Optional[Model] = None):
        self.config = config or get_model_config()
        self._model = model
        self._agent: Optional[Agent] = None

    @classmethod
    def from_env(cls) -> "ChartCompleter":
        return cls(get_model_config())

    @property
    def model_name(self) -> str:
        if self._model is not None:
            return self._model.model_name
        return self.config.full_name

    def _resolve_model(self) -> Union[Model, str]:
        if self._model is not None:
            return self._model
        return get_model_name(self.config)

    def get_agent(self) -> Agent:
        if self._agent is None:
            self._agent = Agent(self._resolve_model(), output_type=str, system_prompt=SYSTEM_PROMPT)
        return self._agent

    async def complete(self, prompt: str) -> Completion:
        logger.debug("Requesting completion from %s (%d chars)", self.model_name, len(prompt))
        try:
            result = await self.get_agent().run(prompt)
        except Exception as e:
            logger.warning("Completion from %s failed: %s", self.model_name, e)
            return Completion(success=False, error=str(e), model=self.model_name)

        return Completion(success=True, content=result.output or "", model=self.model_name)
