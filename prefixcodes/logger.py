"""
logger.py

Logging module for prefixcodes.


"""


from datetime import datetime
from typing import Union, Optional

class LogLevel:
    INFO = 0
    WARNING = 1
    ERROR = 2
    PROGRESS = 3 


class Log:
    def __init__(self, type_name: str, level: int, message: str) -> None:
        self.level = level
        self.type_name = type_name
        self.message = message
        self.date = datetime.now()
        
    def __str__(self) -> str:
        return f"{self.date} - {self.type_name} - {self.level} - {self.message}"
    
    def __repr__(self) -> str:
        return self.__str__()


class ProbabilityLog(Log):
    def __init__(self, value: str, probability: float, bits: float) -> None:
        self.value = value
        self.probability = probability
        self.bits = bits
        super().__init__("Probability_log", LogLevel.INFO, f"Symbol: {value!r}, Probability: {probability}, Bits: {bits}")


class CodeAssignmentLog(Log):
    def __init__(self, scheme: str, value: str, code: str) -> None:
        self.scheme = scheme
        self.value = value
        self.code = code
        super().__init__("Code_assignment_log", LogLevel.INFO, f"Scheme: {scheme}, Symbol: {value!r}, Code: {code!r}")


class DegenerateInputLog(Log):
    def __init__(self, message: str) -> None:
        super().__init__("Degenerate_input_log", LogLevel.WARNING, message)


class PartitionProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Partition_progress_step", LogLevel.PROGRESS, message)


class MergeProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Merge_progress_step", LogLevel.PROGRESS, message)


class Logger:
    def __init__(self) -> None:
        self.partition_progress_count = 0
        self.merge_progress_count = 0

        self.logs = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True
        self.record_progress = False

        self.display_info = False
        self.display_warning = True
        self.display_error = True
        self.display_progress = False

        self.partition_step_interval_count = 10
        self.merge_step_interval_count = 10

    def log(self, log: Union[Log, str]) -> None:
        if not (isinstance(log, Log) or isinstance(log, str)):
            raise ValueError("Log must be an instance of Log class or a string")
        if isinstance(log, str):
            log = Log("General", LogLevel.INFO, log)
        
        if log.level == LogLevel.INFO:
            if self.record_info:
                self.logs.append(log)
            if self.display_info:
                print(log)
        elif log.level == LogLevel.WARNING:
            if self.record_warning:
                self.logs.append(log)
            if self.display_warning:
                print(log)
        elif log.level == LogLevel.ERROR:
            if self.record_error:
                self.logs.append(log)
            if self.display_error:
                print(log)
        elif log.level == LogLevel.PROGRESS:
            if isinstance(log, PartitionProgressStep):
                self.partition_progress_count += 1
                count = self.partition_progress_count
                interval = self.partition_step_interval_count
            elif isinstance(log, MergeProgressStep):
                self.merge_progress_count += 1
                count = self.merge_progress_count
                interval = self.merge_step_interval_count
            else:
                raise ValueError(f"Unknown progress step: {log.type_name}")
            if log.total_steps is not None:
                log.message = f"{log.base_message} ({count}/{log.total_steps})"
            else:
                log.message = f"{log.base_message} ({count})"
            if self.record_progress:
                self.logs.append(log)
            if self.display_progress and (count % interval == 0):
                print(log)

    def get_logs(self, log_type: Optional[type] = None) -> list:
        if log_type is None:
            return list(self.logs)
        return [log for log in self.logs if isinstance(log, log_type)]

    def clear(self) -> None:
        self.logs = []
        self.partition_progress_count = 0
        self.merge_progress_count = 0

    def save(self, file_path: str) -> None:
        with open(file_path, 'w') as file:
            for log in self.logs:
                file.write(str(log) + "\n")
