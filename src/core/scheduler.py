"""
Cola de temporizadores de un solo hilo.

Sustituye a setTimeout/after(): las tareas se programan con un retardo y el
bucle principal llama a run_due() en cada frame para ejecutar las vencidas.
No hay hilos; cada callback se ejecuta completo antes del siguiente.
"""

import heapq
import itertools
import logging
import time

logger = logging.getLogger(__name__)


class ScheduledTask:
    """
    Tarea diferida de un solo disparo.

    Atributos:
        due (float): Instante (según el reloj de la cola) en que vence
        callback (callable): Función sin argumentos a ejecutar
        cancelled (bool): True si se canceló antes de ejecutarse
        done (bool): True si ya se ejecutó
    """

    def __init__(self, due, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.done = False

    def cancel(self):
        """Cancela la tarea. No tiene efecto si ya se ejecutó."""
        if not self.done:
            self.cancelled = True

    @property
    def active(self):
        return not (self.cancelled or self.done)


class TimerQueue:
    """
    Cola de tareas diferidas ordenada por vencimiento.

    Las tareas con el mismo vencimiento se ejecutan en orden de programación.
    El reloj es inyectable para poder simular el paso del tiempo en tests.
    """

    def __init__(self, clock=time.monotonic):
        self.clock = clock
        self._heap = []
        self._counter = itertools.count()

    def schedule(self, delay, callback):
        """
        Programa `callback` para dentro de `delay` segundos.

        Returns:
            ScheduledTask: Manejador que permite cancelar la tarea
        """
        task = ScheduledTask(self.clock() + delay, callback)
        heapq.heappush(self._heap, (task.due, next(self._counter), task))
        return task

    def run_due(self, now=None):
        """
        Ejecuta todas las tareas vencidas.

        Args:
            now (float): Instante de referencia (por defecto, el reloj)

        Returns:
            int: Número de callbacks ejecutados
        """
        if now is None:
            now = self.clock()

        executed = 0
        while self._heap and self._heap[0][0] <= now:
            _, _, task = heapq.heappop(self._heap)
            if task.cancelled:
                continue
            task.done = True
            task.callback()
            executed += 1

        if executed:
            logger.debug("Ejecutadas %d tareas diferidas", executed)
        return executed

    def pending(self):
        """Número de tareas programadas que siguen activas."""
        return sum(1 for _, _, task in self._heap if task.active)
