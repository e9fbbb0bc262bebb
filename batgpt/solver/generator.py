"""Solution generator backed by the OpenAI chat completions API."""

import logging
from typing import List, Optional

import openai

from ..client.models import Exercise
from ..exceptions import GenerationError


logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-3.5-turbo"

SYSTEM_PROMPT = (
    "Solve the provided problem by editing the provided java method. "
    "Only respond with the unformatted code and nothing else."
)


class SolutionGenerator:
    """Turns an exercise into solution code using a chat model."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        client: Optional[openai.OpenAI] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the generator.

        Args:
            api_key: OpenAI API key used by this generator only.
            model: Chat model identifier.
            client: Preconfigured client, mainly for tests.
            timeout: Per-request timeout in seconds, None for no timeout.
        """
        self.model = model
        if client is None:
            try:
                client = openai.OpenAI(api_key=api_key, timeout=timeout)
            except openai.OpenAIError as e:
                raise GenerationError(f"Could not create OpenAI client: {e}") from e
        self.client = client

    @staticmethod
    def build_messages(exercise: Exercise) -> List[dict]:
        """Build the instruction and content messages for one exercise."""
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {
                "role": "user",
                "content": f"{exercise.statement}\n{exercise.starter_code}",
            },
        ]

    def generate(self, exercise: Exercise) -> str:
        """Return the first choice's text for ``exercise``, unmodified."""
        logger.info("Generating solution for %s with %s", exercise.exercise_id, self.model)
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=self.build_messages(exercise),
            )
        except openai.OpenAIError as e:
            raise GenerationError(
                f"Completion request for {exercise.exercise_id} failed: {e}"
            ) from e

        if not response.choices:
            raise GenerationError(f"No choices returned for {exercise.exercise_id}")

        content = response.choices[0].message.content
        if content is None:
            raise GenerationError(f"Empty completion for {exercise.exercise_id}")

        logger.debug("Solution for %s: %d chars", exercise.exercise_id, len(content))
        return content
