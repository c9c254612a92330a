from loguru import logger

from netdb.netdb import *
from netdb.types import ProtocolRecord, ServiceRecord
from netdb import utils, protocols, services, database

from netdb.protocols import ProtocolTable, load_protocol_table, load_protocol_file
from netdb.services import ServiceTable, load_service_table, load_service_file
from netdb.database import init, reset, get_protocols, get_services
from netdb.database import getprotobynumber, getprotobyname, getservbyname, getservbyport

logger.disable('netdb')
