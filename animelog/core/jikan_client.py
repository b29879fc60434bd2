import requests
import logging
from typing import Dict
from .interfaces import JikanClientInterface, JikanResponse, JikanConfig, JikanError

logger = logging.getLogger(__name__)

class JikanClient(JikanClientInterface):
    """Concrete implementation of Jikan client"""
    
    def __init__(self, config: JikanConfig, session: requests.Session = None):
        self.config = config
        self.session = session or requests.Session()
        self.session.headers.update({
            "accept": "application/json"
        })
    
    def make_request(self, endpoint: str, params: Dict = None) -> JikanResponse:
        """Make HTTP request to Jikan API"""
        url = f"{self.config.base_url.rstrip('/')}/{endpoint.lstrip('/')}"
        params = params or {}
        try:
            logger.info(f"Making request to: {url} {params}")
            response = self.session.get(url, params=params, timeout=self.config.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request exception: {str(e)}")
            raise JikanError(f"Request failed: {str(e)}")
        
        if 200 <= response.status_code < 300:
            try:
                return JikanResponse(response.json(), response.status_code, True)
            except ValueError as e:
                logger.error(f"Invalid JSON from {url}: {str(e)}")
                raise JikanError(f"Invalid JSON response: {str(e)}", response.status_code)
        
        logger.error(f"API request failed: {response.status_code} - {response.text}")
        return JikanResponse({}, response.status_code, False)
