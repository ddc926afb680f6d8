import json
import logging
from datetime import datetime, timezone

LOGGER_NAME = "httpsms"

class JSONFormatter(logging.Formatter):
    def format(self, record):
        log_data = {
            "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "message": record.getMessage(),
        }
        
        # Add extra fields if present
        if hasattr(record, 'service'):
            log_data['service'] = record.service
            
        return json.dumps(log_data)

def setup_logging(log_level: str = "INFO", json_output: bool = True):
    """Setup logging for the httpsms logger, JSON lines by default"""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level.upper())
    
    # Reuse the handler installed by a previous call
    handler = next(
        (h for h in logger.handlers if getattr(h, '_httpsms', False)),
        None
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._httpsms = True
        logger.addHandler(handler)
    handler.setFormatter(JSONFormatter() if json_output else logging.Formatter())
    
    return logger
