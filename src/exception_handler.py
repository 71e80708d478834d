import logging
import traceback
from typing import Dict, Any, List

from .errors import DraftValidationError, ServerRejectionError, TransportError


class ErrorHandler:
    """Centralized error handling and logging for snippet submission."""
    
    def __init__(self, log_level: str = "INFO"):
        self.logger = self._setup_logging(log_level)
        self.errors: List[Dict[str, Any]] = []
    
    def _setup_logging(self, level: str) -> logging.Logger:
        """Configure structured logging."""
        logger = logging.getLogger("snippet_share")
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        
        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        
        return logger
    
    def handle_error(self, error: Exception, context: Dict[str, Any]) -> Dict[str, Any]:
        """Process and log error with context information."""
        error_info = {
            "type": type(error).__name__,
            "message": str(error),
            "context": context,
            "traceback": traceback.format_exc() if self.logger.level <= logging.DEBUG else None
        }
        
        self.logger.error(
            f"Submission error: {error_info['type']}: {error_info['message']} | Context: {context}"
        )
        
        self.errors.append(error_info)
        
        return error_info
    
    def collect_submission_error(self, error: Exception, endpoint: str, title: str) -> Dict[str, Any]:
        """Collect a failed snippet submission with request context."""
        context: Dict[str, Any] = {
            "endpoint": endpoint,
            "title": title,
        }
        if isinstance(error, ServerRejectionError):
            context["status_code"] = error.status_code
        return self.handle_error(error, context)
    
    def should_retry(self, error: Exception) -> bool:
        """Whether offering the user another attempt makes sense."""
        if isinstance(error, (DraftValidationError, TransportError)):
            return True
        if isinstance(error, ServerRejectionError):
            return error.status_code >= 500 or error.status_code in (408, 429)
        return False
    
    def get_error_summary(self) -> Dict[str, Any]:
        """Generate summary of all collected errors."""
        if not self.errors:
            return {"total_errors": 0, "error_types": {}, "failed_submissions": []}
        
        error_types: Dict[str, int] = {}
        failed_submissions = []
        
        for error in self.errors:
            error_type = error["type"]
            error_types[error_type] = error_types.get(error_type, 0) + 1
            
            context = error.get("context", {})
            failed_submissions.append({
                "title": context.get("title") or "untitled",
                "error": error["message"],
                "status_code": context.get("status_code"),
            })
        
        return {
            "total_errors": len(self.errors),
            "error_types": error_types,
            "failed_submissions": failed_submissions
        }
    
    def format_error_report(self) -> str:
        """Format user-friendly error report."""
        summary = self.get_error_summary()
        
        if summary["total_errors"] == 0:
            return ""
        
        lines = [
            f"\n⚠️  Error Summary: {summary['total_errors']} errors occurred",
            ""
        ]
        
        if summary["error_types"]:
            lines.append("Error Types:")
            for error_type, count in summary["error_types"].items():
                lines.append(f"  • {error_type}: {count}")
            lines.append("")
        
        if summary["failed_submissions"]:
            lines.append("Failed Submissions:")
            for failure in summary["failed_submissions"][:5]:  # Show first 5
                lines.append(f"  • {failure['title']}: {failure['error']}")
            
            if len(summary["failed_submissions"]) > 5:
                lines.append(f"  ... and {len(summary['failed_submissions']) - 5} more")
        
        return "\n".join(lines)

