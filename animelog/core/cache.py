import json
import logging
import zlib
from typing import Optional, Any
import redis
from .config import get_settings

logger = logging.getLogger(__name__)


class CacheService:
    """Basit Redis cache servisi (JSON + opsiyonel zlib)"""

    def __init__(self, url: Optional[str] = None, compress: bool = True):
        settings = get_settings()
        self.redis = redis.Redis.from_url(url or settings.REDIS_URL, decode_responses=False)
        self.compress = compress

    def get_json(self, key: str) -> Optional[Any]:
        try:
            data = self.redis.get(key)
        except redis.RedisError as e:
            logger.warning(f"Cache read failed for {key}: {str(e)}")
            return None
        if data is None:
            return None
        if self.compress:
            try:
                data = zlib.decompress(data)
            except zlib.error:
                pass
        try:
            if isinstance(data, bytes):
                data = data.decode("utf-8")
            return json.loads(data)
        except (UnicodeDecodeError, ValueError):
            return None

    def set_json(self, key: str, value: Any, ttl_seconds: int) -> bool:
        raw = json.dumps(value, ensure_ascii=False).encode("utf-8")
        payload = zlib.compress(raw) if self.compress else raw
        try:
            self.redis.setex(key, ttl_seconds, payload)
        except redis.RedisError as e:
            logger.warning(f"Cache write failed for {key}: {str(e)}")
            return False
        return True


class NullCache:
    """Cache used when CACHE_ENABLED is off; every read is a miss"""

    def get_json(self, key: str) -> Optional[Any]:
        return None

    def set_json(self, key: str, value: Any, ttl_seconds: int) -> bool:
        return False
