'''
Tests for the shared loader and display helpers.
'''
import pytest

import netdb
from netdb import ProtocolRecord, ServiceRecord, load_service_table
from netdb.utils import split_fields, iter_fields, parse_int32, format_names, print_protocol, print_service, print_table


class TestSplitFields:

    @pytest.mark.parametrize('line,expected', [
        ('tcp 6 TCP', ['tcp', '6', 'TCP']),
        ('  tcp\t6   TCP  ', ['tcp', '6', 'TCP']),
        ('tcp 6 # TCP', ['tcp', '6']),
        ('# tcp 6', []),
        ('', []),
        ('tcp 6 TCP\r', ['tcp', '6', 'TCP']),
    ])
    def test_split(self, line, expected):
        assert split_fields(line) == expected


class TestIterFields:

    def test_line_numbers_count_skipped_lines(self):
        lines = list(iter_fields('# header\n\nshort\ntcp 6\n'))
        assert lines == [(4, 'tcp 6', ['tcp', '6'])]

    def test_only_newline_splits(self):
        assert len(list(iter_fields('a 1\x0bb 2'))) == 1


class TestParseInt32:

    def test_bounds(self):
        assert parse_int32('2147483647', 'port') == netdb.INT32_MAX
        assert parse_int32('-2147483648', 'port') == netdb.INT32_MIN

    def test_out_of_range(self):
        with pytest.raises(netdb.NetdbBadFormat) as e:
            parse_int32('4294967296', 'port', 12, 'x 4294967296/tcp')

        assert e.value.lineno == 12
        assert 'out of range' in str(e.value)

    @pytest.mark.parametrize('value', ['', ' 1', '1.0', '1e3', 'ten'])
    def test_invalid(self, value):
        with pytest.raises(netdb.NetdbBadFormat):
            parse_int32(value, 'protocol number')


class TestDisplay:

    def test_format_names(self):
        assert format_names(ProtocolRecord('tcp', 6)) == 'tcp'
        assert format_names(ServiceRecord('smtp', 25, 'tcp', ['mail', 'mta'])) == 'smtp (mail mta)'

    def test_print_protocol(self, capsys):
        print_protocol(ProtocolRecord('udp', 17, ['UDP']))
        out = capsys.readouterr().out

        assert '17' in out
        assert 'udp (UDP)' in out

    def test_print_service(self, capsys):
        print_service(ServiceRecord('http', 80, 'tcp', ['www']))
        out = capsys.readouterr().out

        assert '80/tcp' in out
        assert 'http (www)' in out

    def test_print_table(self, capsys):
        print_table(load_service_table('echo 7/tcp\necho 7/udp\n'))
        out = capsys.readouterr().out.splitlines()

        assert len(out) == 2
        assert '7/udp' in out[1]
