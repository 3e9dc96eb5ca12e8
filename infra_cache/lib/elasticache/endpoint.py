from pulumi import Input, Output


class Endpoint:
    """Address and port of a cache endpoint"""

    def __init__(self, hostname: Input[str], port: Input[int]):
        self._hostname = hostname
        self._port = port

    @property
    def hostname(self) -> Input[str]:
        return self._hostname

    @property
    def port(self) -> Input[int]:
        return self._port

    @property
    def socket_address(self) -> Input[str]:
        """`hostname:port`, a plain string when both parts are already known"""
        if isinstance(self._hostname, str) and isinstance(self._port, int):
            return f"{self._hostname}:{self._port}"

        return Output.concat(self._hostname, ":", Output.from_input(self._port).apply(str))
