"""HTTP probe integration."""

from starter_kit.integrations.http_probe.abc import HttpProbe
from starter_kit.integrations.http_probe.fake import FakeHttpProbe
from starter_kit.integrations.http_probe.real import RealHttpProbe

__all__ = ["FakeHttpProbe", "HttpProbe", "RealHttpProbe"]
