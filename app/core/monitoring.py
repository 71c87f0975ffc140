"""
Health check utilities
"""

import time
from datetime import datetime
from typing import Dict, Any

import psutil
from pydantic import BaseModel, ConfigDict

from app.core.config import settings


class SystemHealth(BaseModel):
    """Service health status model"""

    status: str
    timestamp: datetime
    uptime: float
    memory_usage: Dict[str, Any]
    cpu_usage: float
    providers: Dict[str, bool]

    model_config = ConfigDict()


class HealthChecker:
    """Reports process metrics and which provider credentials are configured"""

    def __init__(self):
        self.start_time = time.time()
        self._process = psutil.Process()

    def get_memory_info(self) -> Dict[str, Any]:
        """Get memory usage of this process"""
        info = self._process.memory_info()
        return {
            "rss": info.rss,
            "vms": info.vms,
            "percentage": round(self._process.memory_percent(), 2),
        }

    def get_cpu_info(self) -> float:
        """CPU usage of this process since the previous call (non-blocking)"""
        return self._process.cpu_percent(interval=None)

    def get_system_health(self) -> SystemHealth:
        providers = settings.provider_keys_configured
        # Missing keys still let the service run; provider calls will fail auth.
        status = "healthy" if all(providers.values()) else "degraded"

        return SystemHealth(
            status=status,
            timestamp=datetime.now(),
            uptime=time.time() - self.start_time,
            memory_usage=self.get_memory_info(),
            cpu_usage=self.get_cpu_info(),
            providers=providers,
        )


# Global health checker instance
health_checker = HealthChecker()
