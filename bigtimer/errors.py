class BigTimerError(Exception):
    exit_code = 1


class ConfigError(BigTimerError):
    exit_code = 2


class TerminalError(BigTimerError):
    exit_code = 1
