"""
Cosmetic loading progress: a step indicator and a typed status line.

Both run as independent asyncio tasks while a search is loading and only
emit presentational events; they never touch request state.
"""
from __future__ import annotations

import asyncio
import logging
import random
from typing import Any, Callable, Dict, List, Optional, Sequence

from recipe_search.assistant.term_banks import ANALYSIS_STEPS, LOADERS, LOADING_MESSAGES

logger = logging.getLogger(__name__)

DEFAULT_STEP_INTERVAL = 0.8
DEFAULT_TYPE_INTERVAL = 0.03
DEFAULT_MESSAGE_PAUSE = 1.5

EventSink = Callable[[Dict[str, Any]], None]


def _emit(emit: EventSink, *, type_: str, **payload: Any) -> None:
    emit({"type": type_, **payload})


class LoadingProgress:
    def __init__(
        self,
        emit: EventSink,
        *,
        steps: Sequence[str] = ANALYSIS_STEPS,
        messages: Sequence[str] = LOADING_MESSAGES,
        step_interval: float = DEFAULT_STEP_INTERVAL,
        type_interval: float = DEFAULT_TYPE_INTERVAL,
        message_pause: float = DEFAULT_MESSAGE_PAUSE,
        rng: Optional[random.Random] = None,
    ):
        self._emit = emit
        self.steps = tuple(steps)
        self.messages = tuple(messages)
        self.step_interval = step_interval
        self.type_interval = type_interval
        self.message_pause = message_pause
        self._rng = rng or random.Random()
        self._tasks: List[asyncio.Task] = []

    @property
    def running(self) -> bool:
        return any(not t.done() for t in self._tasks)

    def start(self) -> None:
        """Pick a loader icon and launch both animations. Must be called inside a running loop."""
        if self._tasks:
            raise RuntimeError("loading progress already started")
        _emit(self._emit, type_="loader", name=self._rng.choice(LOADERS))
        self._tasks = [
            asyncio.create_task(self._animate_steps(), name="loading-steps"),
            asyncio.create_task(self._animate_text(), name="loading-text"),
        ]

    async def stop(self) -> None:
        """Cancel both animations and wait until they are gone. Safe to call more than once."""
        tasks, self._tasks = self._tasks, []
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.debug("Loading progress stopped (%d tasks)", len(tasks))

    async def _animate_steps(self) -> None:
        for index in range(len(self.steps)):
            _emit(self._emit, type_="step", index=index, label=self.steps[index], status="pending")

        current = 0
        while True:
            await asyncio.sleep(self.step_interval)
            if current > 0:
                _emit(self._emit, type_="step", index=current - 1,
                      label=self.steps[current - 1], status="completed")
            if current >= len(self.steps):
                return
            _emit(self._emit, type_="step", index=current,
                  label=self.steps[current], status="active")
            current += 1

    async def _animate_text(self) -> None:
        if not self.messages:
            return
        index = 0
        while True:
            message = self.messages[index]
            for end in range(1, len(message) + 1):
                await asyncio.sleep(self.type_interval)
                _emit(self._emit, type_="status", text=message[:end])
            index = (index + 1) % len(self.messages)
            await asyncio.sleep(self.message_pause)
