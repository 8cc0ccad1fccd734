from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


CONSUMER_KEY = "consumer_key"
PRIVATE_KEY = "private_key"
REQUEST_TOKEN = "request_token"
ACCESS_TOKEN = "access_token"
SECRET = "secret"
JIRA_HOME = "jira_home"

KNOWN_KEYS = (CONSUMER_KEY, PRIVATE_KEY, REQUEST_TOKEN, ACCESS_TOKEN, SECRET, JIRA_HOME)

# Sample RSA key body used by the Jira OAuth example app. Not a real secret;
# deployments should replace it in config.properties.
_EXAMPLE_PRIVATE_KEY = (
    "MIICdwIBADANBgkqhkiG9w0BAQEFAASCAmEwggJdAgEAAoGBAMvH8LCKalC/0DvY1e8Ksh4cchd3xdJraUannv6LzHCSTrZf"
    "RveyoAX1eXGUoLLuAszmhkXhKyyuIuLc1AaJvESlFRZHfNq5bBgpQOd8HGe9dSzC3V8mvMokRe9E7PFGFlDxILcLR8Zb/twA"
    "IH21DhrhJz3yPh1QXVBjtr/R+ZjNAgMBAAECgYALoEWYHN2B69+aen2CHM8arq7HrfqoTZ58/HUyupEYXxCEkR0AZr2AeYfL"
    "NhqQ+slIHWLNu9H1w52T6dti4BrQibBSeiR+Aallar+6T3Rvz+ePBD+qq+n1JJq9P6P7m+SdWnj/v2iJn0jheGMzo07omxAu"
    "L6AXARxIRN/NK0s1IQJBAO6ckLeexGS0HOThhYSYFckgaBrpCBzpbus4O9V9ZGV0Eptur5hBhwm6samasLjHwKWVBJrTDv0J"
    "vaVqKNBb+rUCQQDaoZdDZDRyM1rE8dSjLqYlZZ3ZIsQ0TQTqUu5/Ktw9ZFT909ZDAle1PGB6N3jfWBdpDFpbKj4aIu9wCTcC"
    "Izy5AkEAyEFKC3EJ7mJjJYxIHEHvdr7l4D/W+TzIRE0Lml8EVUkXHK/GWwgTpwyycl9LFak/ezgXh0C/AYqdSShRXJz1SQJB"
    "AJYbRAOdFPUjlTqK3vd628/pSMsAN73A85L+hYkCIFx2OnRbsUwom5dvcL34wCB4Fvqk5JSbGDBRtBsz+HSbROECQCano2Ug"
    "K5kQmIVj8QTGOQYkrNy2at7yTvH9Gx3O1XHiMTYmPbqZD82CbXXtLRaH/6IwwtkPIfWbk08kGB3/mJ8="
)

DEFAULT_PROPERTY_VALUES: Mapping[str, str] = MappingProxyType(
    {
        JIRA_HOME: "https:peterkentish.atlassian.net",
        CONSUMER_KEY: "OauthKey",
        PRIVATE_KEY: _EXAMPLE_PRIVATE_KEY,
    }
)
