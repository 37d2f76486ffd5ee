"""Gate global de visibilidade dos palpites ("bloqueado").

Quando bloqueado, palpites ficam congelados e passam a ser públicos
(listagens de palpites alheios e ranking). Estado vive apenas durante o
processo e reinicia como desbloqueado.

O toggle é read-modify-write-notify atômico: o broadcast é publicado
ainda sob o lock, então a ordem das notificações é a ordem dos commits.
O canal nunca bloqueia e falhas dele não desfazem o toggle.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from app.protocols.notification import VISIBILITY_CHANGED_EVENT
from utils.errors import ForbiddenError

if TYPE_CHECKING:
    from app.protocols.notification import NotificationChannelProtocol

logger = logging.getLogger(__name__)


class VisibilityGate:
    """Flag compartilhada com exclusão mútua, injetada em quem precisa dela.

    Args:
        channel: Canal que recebe `VisibilityChanged` a cada toggle
        initial: Estado inicial (padrão: desbloqueado)
    """

    def __init__(self, channel: NotificationChannelProtocol, initial: bool = False) -> None:
        self._lock = threading.Lock()
        self._locked = initial
        self._channel = channel

    def get_status(self) -> bool:
        """Retorna True quando os palpites estão bloqueados/visíveis."""
        with self._lock:
            return self._locked

    def toggle_status(self, actor: str | None = None) -> bool:
        """Inverte o estado e notifica os assinantes.

        Args:
            actor: Nome do usuário que alterou (apenas para log)

        Returns:
            Novo estado.
        """
        with self._lock:
            self._locked = not self._locked
            locked = self._locked
            self._notify(locked)

        logger.info("guess_status_toggled", extra={"locked": locked, "actor": actor})
        return locked

    def _notify(self, locked: bool) -> None:
        try:
            self._channel.broadcast(VISIBILITY_CHANGED_EVENT, {"locked": locked})
        except Exception as exc:
            logger.warning(
                "guess_status_notification_failed",
                extra={"locked": locked, "error_type": type(exc).__name__},
            )

    def ensure_guesses_visible(self) -> None:
        """Exige gate bloqueado para expor palpites/pontuações de terceiros.

        Raises:
            ForbiddenError: Se os palpites ainda não foram liberados.
        """
        if not self.get_status():
            raise ForbiddenError("Palpites ainda não foram liberados para consulta.")

    def ensure_guesses_open(self) -> None:
        """Exige gate desbloqueado para aceitar novos palpites.

        Raises:
            ForbiddenError: Se os palpites estão bloqueados.
        """
        if self.get_status():
            raise ForbiddenError("Palpites estão bloqueados.")
