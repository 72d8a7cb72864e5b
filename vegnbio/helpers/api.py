import json
import logging
import threading
from abc import abstractmethod
from typing import Any, Dict, TypedDict, Union

from flask import Flask, Request, Response

logger = logging.getLogger(__name__)

ThreadLockType = Union[threading.Lock, threading.RLock]

Input = dict
Output = Union[Dict[str, Any], Response, TypedDict]  # type: ignore


class ApiHandler:
    def __init__(self, app: Flask, thread_lock: ThreadLockType):
        self.app = app
        self.thread_lock = thread_lock

    @classmethod
    def get_methods(cls) -> list[str]:
        return ["POST"]

    @abstractmethod
    async def process(self, input: Input, request: Request) -> Output:
        pass

    async def handle_request(self, request: Request) -> Response:
        try:
            # input data from request based on type
            input_data: Input = {}
            if request.is_json:
                try:
                    if request.data:
                        input_data = request.get_json()
                except Exception as e:
                    logger.warning("Error parsing JSON: %s", e)
                    input_data = {}
            elif request.args:
                input_data = request.args.to_dict()

            output = await self.process(input_data, request)

            if isinstance(output, Response):
                return output
            return Response(
                response=json.dumps(output, ensure_ascii=False),
                status=200,
                mimetype="application/json",
            )

        except Exception:
            logger.exception("API error in %s", type(self).__name__)
            return Response(
                response=json.dumps({"error": "Internal server error"}),
                status=500,
                mimetype="application/json",
            )
