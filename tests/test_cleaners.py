"""
Tests for resource cleaners - Pulumi annotation removal and Secret decoding
"""
import base64
import copy

import pytest

from helm_gen.normalizer.cleaners import (
    decode_secret_value,
    normalize_secret_encoding,
    remove_pulumi_annotations,
)


class TestRemovePulumiAnnotations:
    """Test pulumi.com/* annotation stripping"""

    def test_keeps_other_annotations(self):
        doc = {
            'apiVersion': 'v1',
            'kind': 'ServiceAccount',
            'metadata': {
                'name': 'test',
                'annotations': {
                    'pulumi.com/autonamed': 'true',
                    'pulumi.com/skipAwait': 'true',
                    'some-other-annotation': 'keep',
                },
            },
        }

        remove_pulumi_annotations(doc)

        assert doc['metadata']['annotations'] == {'some-other-annotation': 'keep'}

    def test_non_string_keys_are_kept(self):
        doc = {'metadata': {'annotations': {1: 'x', 'pulumi.com/autonamed': 'true'}}}

        remove_pulumi_annotations(doc)

        assert doc['metadata']['annotations'] == {1: 'x'}

    def test_removes_empty_annotations_map(self):
        doc = {
            'apiVersion': 'v1',
            'kind': 'ServiceAccount',
            'metadata': {
                'name': 'test',
                'annotations': {'pulumi.com/autonamed': 'true'},
            },
        }

        remove_pulumi_annotations(doc)

        assert 'annotations' not in doc['metadata']
        assert doc['metadata'] == {'name': 'test'}

    def test_is_idempotent(self):
        doc = {
            'metadata': {
                'name': 'test',
                'annotations': {
                    'pulumi.com/autonamed': 'true',
                    'prometheus.io/scrape': 'true',
                },
            },
        }

        remove_pulumi_annotations(doc)
        once = copy.deepcopy(doc)
        remove_pulumi_annotations(doc)

        assert doc == once

    def test_similar_prefix_is_not_stripped(self):
        doc = {'metadata': {'annotations': {'pulumi.community/x': 'keep'}}}

        remove_pulumi_annotations(doc)

        assert doc['metadata']['annotations'] == {'pulumi.community/x': 'keep'}

    def test_no_metadata_or_annotations(self):
        doc = {'apiVersion': 'v1', 'kind': 'Namespace'}
        remove_pulumi_annotations(doc)
        assert doc == {'apiVersion': 'v1', 'kind': 'Namespace'}

        doc = {'apiVersion': 'v1', 'kind': 'Namespace', 'metadata': {'name': 'ns'}}
        remove_pulumi_annotations(doc)
        assert doc['metadata'] == {'name': 'ns'}


class TestNormalizeSecretEncoding:
    """Test Secret data -> stringData conversion"""

    def test_decodes_data_into_string_data(self):
        doc = {
            'apiVersion': 'v1',
            'kind': 'Secret',
            'metadata': {'name': 'agent-secret'},
            'data': {
                'PULUMI_AGENT_TOKEN': 'cGxhY2Vob2xkZXItdG9rZW4=',  # "placeholder-token"
            },
        }

        normalize_secret_encoding(doc)

        assert 'data' not in doc
        assert doc['stringData'] == {'PULUMI_AGENT_TOKEN': 'placeholder-token'}

    def test_round_trip(self):
        raw = 'https://user:p@ss@example.com/path?x=1'
        doc = {
            'kind': 'Secret',
            'data': {'url': base64.b64encode(raw.encode()).decode()},
        }

        normalize_secret_encoding(doc)

        assert doc['stringData']['url'] == raw

    def test_invalid_base64_passes_through(self, capsys):
        doc = {
            'kind': 'Secret',
            'metadata': {'name': 'broken'},
            'data': {
                'good': 'dmFsdWU=',
                'bad': 'not base64!',
            },
        }

        normalize_secret_encoding(doc)

        assert doc['stringData'] == {'good': 'value', 'bad': 'not base64!'}
        assert '[WARNING]' in capsys.readouterr().out

    def test_non_utf8_payload_passes_through(self):
        encoded = base64.b64encode(b'\xff\xfe\x00binary').decode()
        doc = {'kind': 'Secret', 'data': {'blob': encoded}}

        normalize_secret_encoding(doc)

        assert doc['stringData'] == {'blob': encoded}

    def test_non_string_values_are_kept(self):
        doc = {'kind': 'Secret', 'data': {'count': 3}}

        normalize_secret_encoding(doc)

        assert doc['stringData'] == {'count': 3}

    def test_merges_existing_string_data(self):
        doc = {
            'kind': 'Secret',
            'data': {'a': 'YQ=='},
            'stringData': {'b': 'plain', 'a': 'old'},
        }

        normalize_secret_encoding(doc)

        assert doc['stringData'] == {'b': 'plain', 'a': 'a'}

    def test_skips_non_secret(self):
        doc = {
            'apiVersion': 'v1',
            'kind': 'ConfigMap',
            'data': {'key': 'dmFsdWU='},
        }

        normalize_secret_encoding(doc)

        assert doc['data'] == {'key': 'dmFsdWU='}
        assert 'stringData' not in doc

    def test_secret_without_data(self):
        doc = {'kind': 'Secret', 'stringData': {'k': 'v'}}

        normalize_secret_encoding(doc)

        assert doc == {'kind': 'Secret', 'stringData': {'k': 'v'}}


class TestDecodeSecretValue:

    def test_decode(self):
        assert decode_secret_value('aGVsbG8=') == 'hello'

    def test_decode_empty(self):
        assert decode_secret_value('') == ''

    def test_decode_invalid(self):
        with pytest.raises(ValueError):
            decode_secret_value('***')
