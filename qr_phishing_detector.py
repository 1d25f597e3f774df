#!/usr/bin/env python3
"""
╔══════════════════════════════════════════════════════════════════════════════════╗
║                       QR CODE PHISHING DETECTOR v1.0                           ║
║                              NEATLABS ™                                        ║
║            QR Decoding • URL Normalization • Phishing Risk Scoring             ║
╚══════════════════════════════════════════════════════════════════════════════════╝

Heuristic phishing-risk assessment for links embedded in QR codes.

CAPABILITIES:
  • QR decoding via OpenCV (with enhancement retries for poor captures)
  • URL detection & normalization (scheme-less payloads assumed https://)
  • 13 additive phishing heuristics with human-readable indicators
  • LOW / MEDIUM / HIGH risk tiers
  • HTML fragment / page rendering and plain-text report export

USAGE:
  from qr_phishing_detector import ScanSession
  session = ScanSession()
  result = session.scan_image('code.png')
  session.export_report('qr_phishing_report.txt')

The page behind the link is never fetched and no reputation service is
queried. A LOW score does not mean a link is safe.

Author: NEATLABS
License: Proprietary — All Rights Reserved
"""

import io, os, re, logging, ipaddress, urllib.parse
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Dict, List, Tuple, Any, Callable, NamedTuple

import numpy as np
import cv2
from PIL import Image
from jinja2 import Environment

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# CONSTANTS & CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

VERSION = "1.0.0"
TOOL_NAME = "QR Code Phishing Detector"
BRAND = "NEATLABS"

HIGH_RISK_SCORE = 70
MEDIUM_RISK_SCORE = 35
RISK_LEVELS = ('LOW', 'MEDIUM', 'HIGH')

SUSPICIOUS_TLDS = frozenset({
    'xyz', 'top', 'click', 'gq', 'cf', 'ml', 'tk', 'rest', 'monster', 'zip', 'mov',
})

URL_SHORTENERS = frozenset({
    'bit.ly', 'tinyurl.com', 't.co', 'goo.gl', 'ow.ly', 'is.gd',
    'buff.ly', 'cutt.ly', 'rebrand.ly', 'bit.do',
})

# Matched terms are reported in table order, group by group.
KEYWORD_GROUPS = (
    ('auth', ('login', 'verify', 'update', 'secure', 'password', 'reset', 'signin')),
    ('finance', ('bank', 'wallet', 'payment', 'invoice', 'paypal', 'card')),
    ('urgency', ('urgent', 'immediately', 'suspend', 'locked', 'alert', 'warning')),
    ('crypto', ('crypto', 'bitcoin', 'eth', 'airdrop')),
    ('gov', ('hmrc', 'gov.uk', 'tax', 'fine')),
)

EXECUTABLE_EXTENSIONS = ('.exe', '.apk', '.zip', '.rar', '.scr', '.js', '.bat', '.cmd')
DOCUMENT_EXTENSIONS = ('.pdf', '.doc', '.docx', '.xls', '.xlsx')
ODD_PORTS = frozenset({8080, 3000, 4443, 1337})

MAX_HOST_LABELS = 4
MAX_SEARCH_LENGTH = 80

DEFAULT_PORTS = {'http': 80, 'https': 443, 'ws': 80, 'wss': 443, 'ftp': 21}

SCHEME_RE = re.compile(r'^[a-zA-Z][a-zA-Z0-9+.-]*:')
HTTP_SCHEME_RE = re.compile(r'^https?://', re.I)
FORBIDDEN_HOST_RE = re.compile(r'[\x00-\x20\x7f#%/:<>?@\[\\\]^|]')
IPV4_RE = re.compile(r'^[0-9]{1,3}(\.[0-9]{1,3}){3}$')
ENCODED_BYTE_RE = re.compile(r'%[0-9a-f]{2}', re.I)
NON_ASCII_RE = re.compile(r'[^\x00-\x7f]')

# Printable ASCII left untouched per URL component; everything else becomes %XX.
PATH_SAFE = "!$%&'()*+,-./:;=@[\\]^_|~"
QUERY_SAFE = "!$%&()*+,-./:;=?@[\\]^_`{|}~"
FRAGMENT_SAFE = "!#$%&'()*+,-./:;=?@[\\]^_{|}~"

REPORT_TITLE = "QR Code Phishing Detector Report"
REPORT_DISCLAIMER = "Note: This tool is heuristic and does not guarantee link safety."
REPORT_FILENAME = "qr_phishing_report.txt"

MSG_NO_QR = "Unable to read QR code. Please try another image."
MSG_NO_URL = "No URL detected. Risk analysis is only applied to links."
MSG_NO_INDICATORS = "No obvious phishing indicators detected. This does not guarantee the link is safe."
MSG_CAUTION = ("Treat unexpected links with caution, especially if received via email, "
               "SMS, or QR codes in public places.")

SUPPORTED_IMAGES = {'.png', '.jpg', '.jpeg', '.bmp', '.gif', '.tiff', '.tif', '.webp'}


# ═══════════════════════════════════════════════════════════════════════════════
# DATA MODEL
# ═══════════════════════════════════════════════════════════════════════════════

class NotAUrlError(ValueError):
    """Raised by normalize() for text that does not resolve to a URL with a host."""


class ParsedUrl(NamedTuple):
    scheme: str
    hostname: str
    port: Optional[int]
    path: str
    query: str
    fragment: str
    href: str

    @property
    def full(self) -> str:
        return self.href.lower()

    @property
    def search(self) -> str:
        return f'?{self.query}' if self.query else ''


class RiskAssessment(NamedTuple):
    url: str
    score: int
    level: str
    indicators: Tuple[str, ...]


class HeuristicRule(NamedTuple):
    name: str
    weight: int
    check: Callable[[ParsedUrl], Optional[str]]


# ═══════════════════════════════════════════════════════════════════════════════
# URL NORMALIZER
# ═══════════════════════════════════════════════════════════════════════════════

class UrlNormalizer:
    @staticmethod
    def classify(text):
        try:
            return bool(UrlNormalizer._resolve(text).hostname)
        except ValueError:
            return False

    @staticmethod
    def normalize(text):
        try:
            p = UrlNormalizer._resolve(text)
        except ValueError as e:
            raise NotAUrlError(f'Not a URL: {text[:80]!r}') from e
        if not p.hostname:
            raise NotAUrlError(f'No hostname in: {text[:80]!r}')
        return p

    @staticmethod
    def _resolve(text):
        t = text.strip()
        try:
            return UrlNormalizer._parse(t)
        except ValueError:
            if HTTP_SCHEME_RE.match(t):
                raise
            return UrlNormalizer._parse(f'https://{t}')

    @staticmethod
    def _parse(text):
        if not SCHEME_RE.match(text):
            raise ValueError(f'No scheme: {text[:80]!r}')
        sp = urllib.parse.urlsplit(text)
        scheme = sp.scheme.lower()
        port = sp.port
        if port is not None and DEFAULT_PORTS.get(scheme) == port:
            port = None
        host = UrlNormalizer._host(sp.netloc)

        path = sp.path
        if host and not path:
            path = '/'
        path = urllib.parse.quote(path, safe=PATH_SAFE)
        query = urllib.parse.quote(sp.query, safe=QUERY_SAFE)
        fragment = urllib.parse.quote(sp.fragment, safe=FRAGMENT_SAFE)

        href = f'{scheme}:'
        if sp.netloc:
            userinfo, at, _ = sp.netloc.rpartition('@')
            h = f'[{host}]' if ':' in host else host
            href += f'//{userinfo}{at}{h}' + (f':{port}' if port is not None else '')
        href += path
        if query: href += f'?{query}'
        if fragment: href += f'#{fragment}'

        return ParsedUrl(scheme=scheme, hostname=host, port=port, path=path,
                         query=query, fragment=fragment, href=href)

    @staticmethod
    def _host(netloc):
        hostinfo = netloc.rpartition('@')[2]
        if hostinfo.startswith('['):
            h = hostinfo[1:hostinfo.index(']')]
            ipaddress.IPv6Address(h)
            return h.lower()
        h = hostinfo.split(':', 1)[0]
        if FORBIDDEN_HOST_RE.search(h):
            raise ValueError(f'Forbidden character in host: {h[:80]!r}')
        return h.lower()


classify = UrlNormalizer.classify
normalize = UrlNormalizer.normalize


# ═══════════════════════════════════════════════════════════════════════════════
# RISK ENGINE
# ═══════════════════════════════════════════════════════════════════════════════

def _rule_insecure_scheme(p):
    if p.scheme != 'https':
        return 'Uses HTTP instead of HTTPS.'


def _rule_suspicious_tld(p):
    tld = p.hostname.split('.')[-1]
    if tld in SUSPICIOUS_TLDS:
        return f'Suspicious top-level domain (.{tld}).'


def _rule_shortener(p):
    if p.hostname in URL_SHORTENERS:
        return 'URL shortener detected (destination may be hidden).'


def _rule_ip_host(p):
    if IPV4_RE.match(p.hostname):
        return 'IP address used instead of domain name.'


def _rule_subdomains(p):
    if len(p.hostname.split('.')) > MAX_HOST_LABELS:
        return 'Excessive subdomains used (possible obfuscation).'


def _rule_at_symbol(p):
    if '@' in p.full:
        return '@ symbol present in URL (can hide real destination).'


def _rule_punycode(p):
    if p.hostname.startswith('xn--'):
        return 'Punycode domain detected (possible homograph attack).'


def _rule_keywords(p):
    full = p.full
    hits = [k for _, terms in KEYWORD_GROUPS for k in terms if k in full]
    if hits:
        return f'Contains sensitive or urgent keywords: {", ".join(hits)}.'


def _rule_long_query(p):
    if len(p.search) > MAX_SEARCH_LENGTH:
        return 'Very long query string (possible tracking or obfuscation).'


def _rule_encoded(p):
    if ENCODED_BYTE_RE.search(p.full):
        return 'Encoded characters present in URL.'


def _has_extension(p, exts):
    path = p.path.lower()
    return any(path.endswith(e) for e in exts)


def _rule_executable(p):
    if _has_extension(p, EXECUTABLE_EXTENSIONS):
        return 'Suspicious executable or archive file extension in URL path.'


def _rule_document(p):
    if not _has_extension(p, EXECUTABLE_EXTENSIONS) and _has_extension(p, DOCUMENT_EXTENSIONS):
        return 'Document download detected (common in phishing campaigns).'


def _rule_odd_port(p):
    if p.port is not None and p.port in ODD_PORTS:
        return f'Non-standard port used (:{p.port}).'


def _rule_non_ascii_host(p):
    if NON_ASCII_RE.search(p.hostname):
        return 'Non-ASCII characters in domain (possible homoglyph attack).'


HEURISTIC_RULES = (
    HeuristicRule('insecure_scheme', 20, _rule_insecure_scheme),
    HeuristicRule('suspicious_tld', 20, _rule_suspicious_tld),
    HeuristicRule('shortener', 25, _rule_shortener),
    HeuristicRule('ip_host', 25, _rule_ip_host),
    HeuristicRule('subdomains', 15, _rule_subdomains),
    HeuristicRule('at_symbol', 20, _rule_at_symbol),
    HeuristicRule('punycode', 20, _rule_punycode),
    HeuristicRule('keywords', 20, _rule_keywords),
    HeuristicRule('long_query', 10, _rule_long_query),
    HeuristicRule('encoded', 10, _rule_encoded),
    HeuristicRule('executable', 30, _rule_executable),
    HeuristicRule('document', 10, _rule_document),
    HeuristicRule('odd_port', 10, _rule_odd_port),
    HeuristicRule('non_ascii_host', 15, _rule_non_ascii_host),
)


def classify_risk(score):
    if score >= HIGH_RISK_SCORE: return 'HIGH'
    if score >= MEDIUM_RISK_SCORE: return 'MEDIUM'
    return 'LOW'


class RiskEngine:
    @staticmethod
    def assess(parsed: ParsedUrl, rules=HEURISTIC_RULES) -> RiskAssessment:
        score, inds = 0, []
        for rule in rules:
            msg = rule.check(parsed)
            if msg:
                score += rule.weight
                inds.append(msg)
        return RiskAssessment(url=parsed.href, score=score, level=classify_risk(score), indicators=tuple(inds))


assess = RiskEngine.assess


def analyse_url(text) -> Optional[RiskAssessment]:
    """classify -> normalize -> assess; None when the text is not a link."""
    if not classify(text):
        return None
    return assess(normalize(text))


# ═══════════════════════════════════════════════════════════════════════════════
# PRESENTATION
# ═══════════════════════════════════════════════════════════════════════════════

def escape_html(t):
    return str(t).replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')


def escape_attr(t):
    return str(t).replace('&', '&amp;').replace('"', '&quot;').replace("'", '&#x27;').replace('<', '&lt;')


BADGES = {
    'LOW': ('risk-low', '\U0001F7E2'),
    'MEDIUM': ('risk-medium', '\U0001F7E1'),
    'HIGH': ('risk-high', '\U0001F534'),
}

_env = Environment(autoescape=False, trim_blocks=True, lstrip_blocks=True)
_env.filters['escape_html'] = escape_html
_env.filters['escape_attr'] = escape_attr

FRAGMENT_TEMPLATE = _env.from_string("""\
<div class="risk-badge {{ badge }}">
    <span>{{ icon }}</span>
    <span>{{ a.level }} RISK</span>
</div><br>
<strong>Analysed URL:</strong> \
{% if a.level == 'LOW' %}
<a href="{{ a.url|escape_attr }}" target="_blank" rel="noopener noreferrer" class="safe-link">{{ a.url|escape_html }}</a><br>
{% else %}
<span class="inert-link">{{ a.url|escape_html }}</span><br>
{% endif %}
<strong>Score:</strong> {{ a.score }}<br>
{% if a.indicators %}
<strong>Indicators:</strong><ul>
{% for ind in a.indicators %}
<li>{{ ind|escape_html }}</li>
{% endfor %}
</ul>
{{ caution }}
{% else %}
{{ no_indicators }}
{% endif %}
""")

PAGE_TEMPLATE = _env.from_string("""\
<!DOCTYPE html><html lang="en"><head><meta charset="UTF-8"><meta name="viewport" content="width=device-width,initial-scale=1.0">
<title>{{ title|escape_html }} — {{ brand }}</title>{{ css }}</head><body><div class="ctr">
<div class="hdr"><div class="brand">{{ brand }}</div><h1>{{ title|escape_html }}</h1>
<div class="meta">Generated: {{ ts }} | Engine: {{ tool }} v{{ version }}</div></div>
<div class="sec">
{{ fragment }}
</div>
<div class="ftr"><strong>{{ brand }}</strong> — {{ tool }} v{{ version }}<br><em>{{ disclaimer|escape_html }}</em></div>
</div></body></html>
""")

PAGE_CSS = """<style>
:root{--bg:#0a0e1a;--bg2:#1a2332;--bdr:#2a3a4a;--txt:#e2e8f0;--txt2:#94a3b8;--mut:#64748b;--acc:#3b82f6;--grn:#22c55e;--ylw:#f59e0b;--red:#ef4444;--mono:'Consolas',monospace;--sans:-apple-system,'Segoe UI',sans-serif}
*{margin:0;padding:0;box-sizing:border-box}body{font-family:var(--sans);background:var(--bg);color:var(--txt);line-height:1.6}.ctr{max-width:900px;margin:0 auto;padding:2rem}
.hdr{background:linear-gradient(135deg,#0f172a,#1e293b,#0f172a);border:1px solid var(--bdr);border-radius:16px;padding:2rem;margin-bottom:2rem}
.brand{font-size:.85rem;font-weight:700;letter-spacing:3px;color:var(--acc);text-transform:uppercase}h1{font-size:1.6rem;font-weight:700;margin:.5rem 0}.meta{font-size:.85rem;color:var(--mut);font-family:var(--mono)}
.sec{background:var(--bg2);border:1px solid var(--bdr);border-radius:12px;padding:1.5rem;margin-bottom:1.5rem}ul{margin:.5rem 0 1rem 1.5rem}
.risk-badge{display:inline-flex;gap:.5rem;padding:.35rem .85rem;border-radius:20px;font-size:.8rem;font-weight:700;text-transform:uppercase;font-family:var(--mono)}
.risk-low{background:rgba(34,197,94,.1);color:var(--grn);border:1px solid rgba(34,197,94,.3)}.risk-medium{background:rgba(245,158,11,.1);color:var(--ylw);border:1px solid rgba(245,158,11,.3)}
.risk-high{background:rgba(239,68,68,.1);color:var(--red);border:1px solid rgba(239,68,68,.3)}
.safe-link{color:var(--acc);word-break:break-all}.inert-link{font-family:var(--mono);font-size:.85rem;color:var(--txt2);word-break:break-all;user-select:all}
.ftr{text-align:center;padding:2rem;color:var(--mut);font-size:.8rem;border-top:1px solid var(--bdr);margin-top:2rem}
</style>"""


class ReportGenerator:
    @staticmethod
    def render_html(a: RiskAssessment) -> str:
        badge, icon = BADGES[a.level]
        return FRAGMENT_TEMPLATE.render(a=a, badge=badge, icon=icon, caution=MSG_CAUTION,
                                        no_indicators=MSG_NO_INDICATORS)

    @staticmethod
    def render_page(a: RiskAssessment, title=REPORT_TITLE) -> str:
        ts = datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M:%S UTC')
        return PAGE_TEMPLATE.render(title=title, brand=BRAND, tool=TOOL_NAME, version=VERSION, ts=ts,
                                    css=PAGE_CSS, fragment=ReportGenerator.render_html(a),
                                    disclaimer=REPORT_DISCLAIMER)

    @staticmethod
    def render_text(a: RiskAssessment) -> str:
        lines = [REPORT_TITLE, '', f'Analysed URL: {a.url}', f'Risk Level: {a.level}', f'Score: {a.score}', '']
        if a.indicators:
            lines.append('Indicators:')
            lines.extend(f'- {r}' for r in a.indicators)
        else:
            lines.append('No obvious phishing indicators detected.')
        lines += ['', REPORT_DISCLAIMER]
        return '\n'.join(lines) + '\n'


render_html = ReportGenerator.render_html
render_page = ReportGenerator.render_page
render_text = ReportGenerator.render_text


# ═══════════════════════════════════════════════════════════════════════════════
# QR DECODER
# ═══════════════════════════════════════════════════════════════════════════════

class QRDecoder:
    def __init__(self):
        self.cv2_det = cv2.QRCodeDetector()

    def decode(self, source) -> Optional[str]:
        codes = self.decode_all(source).get('codes', [])
        return codes[0]['data'].strip() if codes else None

    def decode_all(self, source) -> Dict[str, Any]:
        img = self._load(source)
        if img is None:
            logger.warning("Cannot read image: %s", self._describe(source))
            return {'error': f'Cannot read: {self._describe(source)}', 'codes': [], 'multi_qr_detected': False}
        gray = img if img.ndim == 2 else cv2.cvtColor(img, cv2.COLOR_BGRA2GRAY if img.shape[2] == 4 else cv2.COLOR_BGR2GRAY)
        res = {'codes': [], 'multi_qr_detected': False, 'image_dimensions': (gray.shape[1], gray.shape[0])}

        try:
            d, p, _ = self.cv2_det.detectAndDecode(gray)
            if d:
                res['codes'].append({'data': d, 'points': p[0].tolist() if p is not None else None, 'engine': 'opencv'})
            ret, di, pa, _ = self.cv2_det.detectAndDecodeMulti(gray)
            if ret and di:
                for i, dd in enumerate(di):
                    if dd and not any(c['data'] == dd for c in res['codes']):
                        res['codes'].append({'data': dd, 'points': pa[i].tolist() if pa is not None else None, 'engine': 'opencv'})
        except cv2.error as e:
            logger.debug("OpenCV decode failed: %s", e)

        if not res['codes']:
            for method in (self._thresh, self._adaptive, self._invert, self._scale):
                proc = method(gray)
                if proc is None:
                    continue
                try:
                    d, p, _ = self.cv2_det.detectAndDecode(proc)
                except cv2.error as e:
                    logger.debug("Enhanced decode (%s) failed: %s", method.__name__, e)
                    continue
                if d:
                    res['codes'].append({'data': d, 'points': p[0].tolist() if p is not None else None, 'engine': 'opencv+enhanced'})
                    break

        if len(res['codes']) > 1:
            res['multi_qr_detected'] = True
            logger.warning("Multiple QR codes in one image — using the first one")
        return res

    @staticmethod
    def _load(source):
        if isinstance(source, np.ndarray):
            return source if source.dtype == np.uint8 else source.astype(np.uint8)
        if isinstance(source, Image.Image):
            return cv2.cvtColor(np.array(source.convert('RGB')), cv2.COLOR_RGB2BGR)
        if isinstance(source, (bytes, bytearray)):
            img = cv2.imdecode(np.frombuffer(source, np.uint8), cv2.IMREAD_COLOR)
            if img is None:
                try:
                    img = cv2.cvtColor(np.array(Image.open(io.BytesIO(source)).convert('RGB')), cv2.COLOR_RGB2BGR)
                except OSError:
                    return None
            return img
        img = cv2.imread(str(source))
        if img is None:
            try:
                img = cv2.cvtColor(np.array(Image.open(source).convert('RGB')), cv2.COLOR_RGB2BGR)
            except OSError:
                return None
        return img

    @staticmethod
    def _describe(source):
        if isinstance(source, (str, Path)): return str(source)
        return type(source).__name__

    def _thresh(self, g):
        _, t = cv2.threshold(g, 0, 255, cv2.THRESH_BINARY + cv2.THRESH_OTSU); return t
    def _adaptive(self, g):
        return cv2.adaptiveThreshold(g, 255, cv2.ADAPTIVE_THRESH_GAUSSIAN_C, cv2.THRESH_BINARY, 11, 2)
    def _invert(self, g):
        return cv2.bitwise_not(g)
    def _scale(self, g):
        h, w = g.shape
        if max(h, w) < 500:
            s = 500 / max(h, w)
            return cv2.resize(g, None, fx=s, fy=s, interpolation=cv2.INTER_CUBIC)
        return None


# ═══════════════════════════════════════════════════════════════════════════════
# SCAN SESSION
# ═══════════════════════════════════════════════════════════════════════════════

class ScanSession:
    """
    Holds the state of one interactive scanning session: the last decoded
    payload, the last assessment and the status message shown to the user.
    Copy and export actions read from here; scoring itself stays stateless.
    """

    def __init__(self, decoder=None):
        self.decoder = decoder or QRDecoder()
        self.clear()

    def clear(self):
        self.decoded_text: Optional[str] = None
        self.assessment: Optional[RiskAssessment] = None
        self.message: Optional[str] = None

    def scan_image(self, source, log_cb=None) -> Dict[str, Any]:
        r = self._scan_image(source, log_cb)
        self._remember(r)
        return r

    def scan_text(self, text) -> Dict[str, Any]:
        r = self._analyse(text)
        self._remember(r)
        return r

    def scan_directory(self, dir_path, log_cb=None) -> List[Dict[str, Any]]:
        files = sorted(f for f in Path(dir_path).rglob('*') if f.suffix.lower() in SUPPORTED_IMAGES)
        self._log(f"[*] Found {len(files)} image(s) in {dir_path}", log_cb)
        return [self._scan_image(str(f), log_cb) for f in files]

    def copy_url(self, copy_cb=None) -> Optional[str]:
        if not self.assessment:
            return None
        if copy_cb: copy_cb(self.assessment.url)
        return self.assessment.url

    def render(self) -> str:
        if self.assessment:
            return render_html(self.assessment)
        return f'<p>{escape_html(self.message or "")}</p>'

    def export_report(self, path=None) -> Optional[str]:
        if not self.assessment:
            return None
        path = path or REPORT_FILENAME
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(render_text(self.assessment))
        logger.info("Report written to %s", path)
        return path

    def export_html(self, path) -> Optional[str]:
        if not self.assessment:
            return None
        with open(path, 'w', encoding='utf-8') as f:
            f.write(render_page(self.assessment))
        logger.info("HTML report written to %s", path)
        return path

    def _scan_image(self, source, log_cb):
        self._log(f"[*] Scanning: {QRDecoder._describe(source)}", log_cb)
        dec = self.decoder.decode_all(source)
        codes = dec.get('codes', [])
        if not codes:
            self._log("  [!] No QR code detected.", log_cb)
            r = self._result(None, MSG_NO_QR)
            r['decode'] = dec
            return r
        text = codes[0]['data'].strip()
        self._log(f"  [+] Decoded {len(text)} chars", log_cb)
        r = self._analyse(text)
        r['decode'] = dec
        a = r['assessment']
        if a:
            self._log(f"  RESULT: {a.level} (Score: {a.score})", log_cb)
            for ind in a.indicators:
                self._log(f"    - {ind}", log_cb)
        else:
            self._log("  [-] Payload is not a URL.", log_cb)
        return r

    def _analyse(self, text):
        a = analyse_url(text)
        return self._result(text.strip(), None if a else MSG_NO_URL, a)

    @staticmethod
    def _result(text, message, assessment=None):
        return {'timestamp': datetime.now(timezone.utc).isoformat(), 'decoded_text': text,
                'is_url': assessment is not None, 'assessment': assessment, 'message': message}

    def _remember(self, r):
        self.decoded_text = r['decoded_text']
        self.assessment = r['assessment']
        self.message = r['message']

    @staticmethod
    def _log(m, log_cb=None):
        if log_cb: log_cb(m)
        logger.info(m)
