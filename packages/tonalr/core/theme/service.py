"""Theme service: owns the current inputs and the cached scheme.

Regeneration is triggered by two independent events, a new seed (wallpaper)
color and a tuning change. Either one rebuilds the whole scheme. Schemes are
built outside the lock and published as immutable snapshots, so readers
never observe a half-built palette.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from tonalr.core.config.models import TunableParameters
from tonalr.core.config.settings import is_tuning_key, parse_tunables
from tonalr.core.theme.models import Scheme
from tonalr.core.theme.scheme import build_scheme

if TYPE_CHECKING:
    from tonalr.core.export.boot import BootColorExporter

logger = logging.getLogger(__name__)

SchemeBuilder = Callable[[int, TunableParameters], Scheme]


class ThemeService:
    """Keeps the current scheme in sync with the seed color and tunables.

    Concurrent rebuilds are allowed. Each request takes a ticket; a finished
    build is only published if no newer request has published already, so
    the newest inputs always end up in the cache. Boot exports are serialized
    and skipped once a newer scheme has been published.

    Example:
        >>> service = ThemeService()
        >>> scheme = service.on_seed_changed(0x4285F4)
        >>> service.current_scheme() is scheme
        True
    """

    def __init__(
        self,
        params: TunableParameters | None = None,
        wallpaper_color: int | None = None,
        boot_exporter: BootColorExporter | None = None,
        builder: SchemeBuilder = build_scheme,
    ) -> None:
        """Initialize the service.

        Args:
            params: Initial tunables (defaults if None)
            wallpaper_color: Initial wallpaper seed as 0xRRGGBB, if known
            boot_exporter: Optional exporter run for each published scheme that is still current
            builder: Scheme builder, replaceable for tests
        """
        self._lock = threading.Lock()
        self._export_lock = threading.Lock()
        self._params = params or TunableParameters()
        self._wallpaper_color = wallpaper_color
        self._boot_exporter = boot_exporter
        self._builder = builder

        self._scheme: Scheme | None = None
        self._scheme_inputs: tuple[int, TunableParameters] | None = None
        self._next_ticket = 0
        self._published_ticket = -1

    @property
    def params(self) -> TunableParameters:
        with self._lock:
            return self._params

    @property
    def wallpaper_color(self) -> int | None:
        with self._lock:
            return self._wallpaper_color

    def current_scheme(self) -> Scheme | None:
        """The last published scheme, or None before the first build."""
        with self._lock:
            return self._scheme

    def on_seed_changed(self, wallpaper_color: int) -> Scheme | None:
        """Handle a new wallpaper color and rebuild."""
        with self._lock:
            self._wallpaper_color = wallpaper_color & 0xFFFFFF
        return self.reevaluate(force=True)

    def on_tuning_changed(self, params: TunableParameters) -> Scheme | None:
        """Handle new tunables and rebuild."""
        with self._lock:
            self._params = params
        return self.reevaluate(force=True)

    def on_setting_changed(self, key: str | None, settings: Mapping[str, Any]) -> Scheme | None:
        """Handle a change notification from the settings store.

        Notifications for unrelated keys are ignored. For tuning keys the
        whole tunable set is re-read, since one notification may follow
        several writes.

        Args:
            key: Changed settings key
            settings: Current contents of the settings store

        Returns:
            The rebuilt scheme, or None if the key was ignored or no seed is known
        """
        if not is_tuning_key(key):
            return None
        return self.on_tuning_changed(parse_tunables(settings))

    def reevaluate(self, force: bool = False) -> Scheme | None:
        """Rebuild the scheme from the current inputs.

        Args:
            force: Rebuild even if the cached scheme matches the inputs

        Returns:
            The current scheme after this call, or None if no seed is known yet
        """
        with self._lock:
            if self._wallpaper_color is None:
                logger.debug("No seed color yet, skipping theme generation")
                return None

            params = self._params
            inputs = (params.resolve_seed(self._wallpaper_color), params)
            if not force and self._scheme is not None and self._scheme_inputs == inputs:
                return self._scheme

            ticket = self._next_ticket
            self._next_ticket += 1

        scheme = self._builder(*inputs)

        with self._lock:
            if ticket < self._published_ticket:
                logger.debug(f"Discarding stale scheme build #{ticket}")
                return self._scheme
            self._scheme = scheme
            self._scheme_inputs = inputs
            self._published_ticket = ticket

        logger.info(f"Published scheme #{ticket} for seed #{inputs[0]:06x}")

        if self._boot_exporter is not None:
            self._export(self._boot_exporter, ticket, scheme)

        return scheme

    def _export(self, exporter: BootColorExporter, ticket: int, scheme: Scheme) -> None:
        # One export at a time, and only for the scheme that is still published
        with self._export_lock:
            with self._lock:
                current = ticket == self._published_ticket
            if not current:
                logger.debug(f"Skipping boot export of superseded scheme #{ticket}")
                return
            exporter.export(scheme)


__all__ = [
    "SchemeBuilder",
    "ThemeService",
]
