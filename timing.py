import time


class TimingMeasurement:
    """Marca de início de uma fase, medida com um relógio injetável."""

    def __init__(self, message, clock=time.time):
        self.message = message
        self.clock = clock
        self.beginning = clock()
        self.end = self.beginning

    @property
    def elapsed(self):
        return self.end - self.beginning


def start_timer(message, clock=time.time):
    return TimingMeasurement(message, clock)


def stop_timer(tm):
    """Imprime o tempo da fase e devolve os segundos decorridos."""
    tm.end = tm.clock()
    print(f"[Timer] {tm.message}: {tm.elapsed:f} seconds")
    return tm.elapsed
