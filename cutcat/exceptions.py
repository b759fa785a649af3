"""Custom exceptions for the cutcat pipeline"""

from typing import Optional


class CutcatError(Exception):
    """Base exception for all cutcat errors"""
    def __init__(self, message: str, module: str = None):
        self.message = message
        self.module = module or "unknown"
        super().__init__(f"[{self.module}] {self.message}")

class ParseError(CutcatError):
    """Malformed timestamp"""
    def __init__(self, text: str, reason: str = "invalid format of time", module: str = None):
        self.text = text
        super().__init__(f"{reason}: {text!r}", module or "timeparse")

class ConfigFormatError(CutcatError):
    """Malformed or unreadable cut configuration"""

class ConfigurationError(CutcatError):
    """Error in settings/setup"""

class DependencyError(CutcatError):
    """Missing required dependencies"""

class EngineInvocationError(CutcatError):
    """External engine process failed or could not be spawned"""
    def __init__(self, message: str, module: str = None,
                 exit_code: Optional[int] = None, stderr: str = ""):
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(message, module)

class EncodingError(EngineInvocationError):
    """Error during the whole-file re-encode"""

class SegmentExtractionError(EngineInvocationError):
    """Error during segment extraction"""

class ConcatenationError(EngineInvocationError):
    """Error during segment concatenation"""

class FilesystemError(CutcatError):
    """Working directory, manifest or cleanup failure"""

class PipelineError(CutcatError):
    """Pipeline aborted; `stage` names the stage that failed"""
    def __init__(self, message: str, stage: str):
        self.stage = stage
        super().__init__(message, module="pipeline")
