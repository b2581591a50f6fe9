import logging

import pytest

from visitorconf import logging_setup


CLIENT_INI = """\
[common]
server_addr = 10.0.0.1
server_port = 7000
user = userA

[ssh]
type = tcp
local_ip = 127.0.0.1
local_port = 22
remote_port = 6000

[secret_ssh_visitor]
type = stcp
role = visitor
server_name = secret_ssh
sk = abc%def
bind_addr = 0.0.0.0
bind_port = 6000

[secret_dns_visitor]
type = sudp
role = visitor
server_name = secret_dns
sk = abcdefg
bind_port = 6002
use_compression = true

[p2p_ssh_visitor]
type = xtcp
role = visitor
server_name = p2p_ssh
sk = abcdefg
bind_port = 6001
use_encryption = true
"""


@pytest.fixture
def stcp_section():
    return {
        "type": "stcp",
        "role": "visitor",
        "server_name": "srvA",
        "bind_port": "6000",
    }


@pytest.fixture
def client_ini():
    return CLIENT_INI


@pytest.fixture
def clean_logging():
    root = logging.getLogger()
    level = root.level
    logging_setup.reset_runtime_logging()
    yield
    logging_setup.reset_runtime_logging()
    root.setLevel(level)
