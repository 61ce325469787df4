import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

def setup_logging(level: str = 'INFO', log_dir: Optional[Path] = None) -> logging.Logger:
    """Set up console logging and, optionally, a dated log file.
    
    Args:
        level: Name of the logging level for the console
        log_dir: Directory to store log files, no file logging when None
        
    Returns:
        Root logger
    """
    handlers = [logging.StreamHandler()]
    
    if log_dir is not None:
        # Create log directory if it doesn't exist
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"{datetime.now().strftime('%Y-%m-%d')}.log"
        handlers.append(logging.FileHandler(log_file))
    
    # The file keeps DEBUG records (tracebacks of failed runs), the console honours the level
    logging.basicConfig(
        level=logging.DEBUG if log_dir is not None else getattr(logging, level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )
    
    for handler in logging.getLogger().handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(getattr(logging, level))
    
    # Per-class extraction details are noisy unless explicitly debugging
    if level != 'DEBUG':
        logging.getLogger('source_analysis.class_extractor').setLevel(logging.WARNING)
    
    return logging.getLogger()
