import pytest

import netdb


PROTOCOLS = '''\
# Internet (IP) protocols
ip      0       IP              # internet protocol, pseudo protocol number
icmp    1       ICMP            # internet control message protocol
tcp     6       TCP             # transmission control protocol
udp     17      UDP             # user datagram protocol
ipv6    41      IPv6            # Internet Protocol, version 6
'''

SERVICES = '''\
# Network services, Internet style
tcpmux          1/tcp                           # TCP port service multiplexer
echo            7/tcp
echo            7/udp
ftp             21/tcp
ssh             22/tcp                          # SSH Remote Login Protocol
smtp            25/tcp          mail
domain          53/tcp                          # Domain Name Server
domain          53/udp
http            80/tcp          www             # WorldWideWeb HTTP
kerberos        88/tcp          kerberos5 krb5 kerberos-sec
kerberos        88/udp          kerberos5 krb5 kerberos-sec
'''


@pytest.fixture
def protocols_file(tmp_path):
    path = tmp_path / 'protocols'
    path.write_text(PROTOCOLS)
    return path


@pytest.fixture
def services_file(tmp_path):
    path = tmp_path / 'services'
    path.write_text(SERVICES)
    return path


@pytest.fixture(autouse=True)
def clean_database():
    '''
    Make sure every test starts without process wide tables.
    '''
    netdb.reset()
    yield
    netdb.reset()
