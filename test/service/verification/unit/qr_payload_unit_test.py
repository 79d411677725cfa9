import pytest

from src.platform.exception.exceptions import DomainError
from src.service.verification.domain.value_object.qr_payload import QrPayload, qr_code_display


@pytest.mark.unit
class TestQrPayload:
    def test_json_object_string_is_decoded(self):
        payload = QrPayload('{"ticketId": "t-1", "eventId": "e-1"}')

        assert payload.value == {'ticketId': 't-1', 'eventId': 'e-1'}
        assert payload.is_structured

    def test_dict_passes_through(self):
        assert QrPayload({'ticketId': 't-1'}).value == {'ticketId': 't-1'}

    @pytest.mark.parametrize(
        'raw',
        [
            'TICKET-7F3A9C',
            't-1|e-1|2',
            'data:image/png;base64,iVBORw0KGgo=',
            '[1, 2, 3]',
            '42',
        ],
    )
    def test_other_strings_are_sent_raw(self, raw):
        payload = QrPayload(raw)

        assert payload.value == raw
        assert not payload.is_structured

    def test_surrounding_whitespace_is_trimmed(self):
        assert QrPayload('  TICKET-1 \n').value == 'TICKET-1'

    @pytest.mark.parametrize('raw', ['', '   ', None, {}])
    def test_empty_input_is_rejected(self, raw):
        with pytest.raises(DomainError, match='QR code data is required'):
            QrPayload(raw)


@pytest.mark.unit
class TestQrCodeDisplay:
    def test_image_data_url_is_shown_as_is(self):
        assert qr_code_display('data:image/png;base64,AAA') == ('image', 'data:image/png;base64,AAA')

    def test_text_is_rendered(self):
        assert qr_code_display('t-1|e-1') == ('render', 't-1|e-1')

    def test_object_is_rendered_as_json(self):
        assert qr_code_display({'ticketId': 't-1'}) == ('render', '{"ticketId":"t-1"}')

    @pytest.mark.parametrize('qr_code', [None, ''])
    def test_missing_code_is_rejected(self, qr_code):
        with pytest.raises(DomainError):
            qr_code_display(qr_code)
