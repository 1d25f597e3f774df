import pytest

from qr_phishing_detector import NotAUrlError, classify, normalize


@pytest.mark.parametrize('text', [
    'https://example.com/login?session=123',
    'http://192.168.1.50/',
    'example.com',
    'www.example.com/path?q=1',
    '  https://example.com  ',
    'user@example.com',
    'https://[::1]:8080/',
])
def test_classify_accepts_urls(text):
    assert classify(text) is True


@pytest.mark.parametrize('text', [
    '',
    '   ',
    'Hello, World! This is a simple text QR code.',
    'BEGIN:VCARD\nVERSION:3.0\nFN:Jane Smith\nTEL:+1-555-0123\nEND:VCARD',
    'WIFI:T:WPA2;S:CoffeeShop_Guest;P:Welcome2024!;;',
    'mailto:jane@acme.com',
    'tel:+15550123',
    'https://',
    'http://example.com:99999/',
    'https://exa mple.com/',
    'https://[not-an-ip]/',
])
def test_classify_rejects_non_urls(text):
    assert classify(text) is False


def test_normalize_assumes_https_without_scheme():
    p = normalize('example.com/Login')
    assert p.scheme == 'https'
    assert p.hostname == 'example.com'
    assert p.path == '/Login'
    assert p.href == 'https://example.com/Login'


def test_normalize_lowercases_host_and_adds_root_path():
    p = normalize('HTTP://WWW.Example.COM')
    assert p.scheme == 'http'
    assert p.hostname == 'www.example.com'
    assert p.path == '/'
    assert p.href == 'http://www.example.com/'


def test_normalize_full_is_lowercased_href():
    p = normalize('https://example.com/A?Token=%AF')
    assert p.href == 'https://example.com/A?Token=%AF'
    assert p.full == 'https://example.com/a?token=%af'


def test_normalize_query_fragment_and_search():
    p = normalize('https://example.com/p?a=1&b=2#frag')
    assert p.query == 'a=1&b=2'
    assert p.search == '?a=1&b=2'
    assert p.fragment == 'frag'
    assert normalize('https://example.com/p').search == ''


def test_normalize_ports():
    assert normalize('http://example.com:8080/').port == 8080
    assert normalize('https://example.com:443/').port is None
    assert normalize('https://example.com:443/').href == 'https://example.com/'
    assert normalize('http://example.com:3000').href == 'http://example.com:3000/'


def test_normalize_percent_encodes_like_a_browser():
    p = normalize('https://example.com/a b/café?q=x y')
    assert p.path == '/a%20b/caf%C3%A9'
    assert p.query == 'q=x%20y'


def test_normalize_keeps_existing_escapes():
    p = normalize('http://192.168.1.50/login/update?session=999&token=%AF%22%9C')
    assert p.query == 'session=999&token=%AF%22%9C'


def test_normalize_keeps_userinfo():
    p = normalize('https://paypal.com@evil.example/')
    assert p.hostname == 'evil.example'
    assert p.href == 'https://paypal.com@evil.example/'


def test_normalize_ipv6_host():
    p = normalize('https://[::1]:8080/x')
    assert p.hostname == '::1'
    assert p.port == 8080
    assert p.href == 'https://[::1]:8080/x'


def test_normalize_non_ascii_host_kept():
    assert normalize('https://pаypal.com/').hostname == 'pаypal.com'


@pytest.mark.parametrize('text', ['', 'just some words', 'mailto:jane@acme.com'])
def test_normalize_rejects_what_classify_rejects(text):
    assert classify(text) is False
    with pytest.raises(NotAUrlError):
        normalize(text)


def test_not_a_url_error_is_value_error():
    with pytest.raises(ValueError):
        normalize('tel:+15550123')
