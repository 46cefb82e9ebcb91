"""
Acumulador do streaming: junta os fragmentos no AnalysisResult.

Pode ser passado direto para st.write_stream.
"""

import logging
from typing import Callable, Iterable, Iterator

from core.errors import AnalysisError, InvalidTransitionError
from core.models import AnalysisResult

logger = logging.getLogger(__name__)


class StreamAccumulator:
    """
    Consome os fragmentos um a um, anexando ao resultado.

    - fim normal do stream -> complete
    - erro na fonte -> failed (texto parcial mantido)
    - is_current() falso -> análise substituída; fragmentos
      seguintes são descartados e a fonte é fechada
    """

    def __init__(
        self,
        result: AnalysisResult,
        fragments: Iterable[str],
        is_current: Callable[[], bool] | None = None,
    ):
        self.result = result
        self._source = iter(fragments)
        self._is_current = is_current or (lambda: True)
        self._consumed = False

    def __iter__(self) -> Iterator[str]:
        if self._consumed:
            raise InvalidTransitionError(
                "stream already consumed; start a new analysis"
            )
        self._consumed = True
        return self._run()

    def _run(self) -> Iterator[str]:
        result = self.result
        if result.is_terminal:
            return
        if not result.is_streaming:
            result.start()

        try:
            for fragment in self._source:
                if not self._is_current():
                    logger.info("Analysis superseded, discarding late fragments")
                    return
                result.append(fragment)
                yield fragment
        except AnalysisError as e:
            logger.error("Analysis failed after %d chars: %s", len(result.text), e.cause)
            if not result.is_terminal:
                result.fail(e.cause)
            return
        except Exception as e:
            logger.exception("Unexpected error while streaming analysis")
            if not result.is_terminal:
                result.fail(str(e) or type(e).__name__)
            return
        finally:
            close = getattr(self._source, "close", None)
            if close is not None:
                close()

        if self._is_current() and result.is_streaming:
            result.complete()
            logger.info("Analysis complete: %d chars", len(result.text))

    def consume(self) -> AnalysisResult:
        for _ in self:
            pass
        return self.result
