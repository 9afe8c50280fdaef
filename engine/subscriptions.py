"""
Subscription Directory

Per-asset registry of observer callbacks for live updates.

Subscribing returns a cancel function rather than asking the caller to
remember what it registered. Several callbacks may watch the same
asset; each is delivered to independently, and one failing callback
never prevents delivery to the others.
"""

import logging
import threading
from typing import Callable, Dict, List, Optional

from core.assets import MonitoredAsset

logger = logging.getLogger(__name__)

UpdateCallback = Callable[[MonitoredAsset], None]
CancelFunc = Callable[[], None]


class _Subscription:
    __slots__ = ("asset_id", "callback", "active")

    def __init__(self, asset_id: str, callback: UpdateCallback):
        self.asset_id = asset_id
        self.callback = callback
        self.active = True


class SubscriptionDirectory:
    """
    Multicast registry of update callbacks keyed by asset id.

    Notification runs while holding the directory lock and checks each
    registration just before calling it, so once a cancel function has
    returned its callback is never invoked again. Callbacks may cancel
    themselves (or others) from inside a notification, but must not wait
    on other threads that use the directory.

    Example:
        directory = SubscriptionDirectory()
        cancel = directory.subscribe("A1", lambda asset: print(asset.readings))
        directory.notify_all("A1", registry.get("A1"))
        cancel()
    """

    def __init__(self):
        self._subscriptions: Dict[str, List[_Subscription]] = {}
        self._lock = threading.RLock()

    def subscribe(self, asset_id: str, callback: UpdateCallback) -> CancelFunc:
        """
        Register a callback for updates to one asset.

        Args:
            asset_id: Asset to watch (need not be registered yet)
            callback: Called with a snapshot of the asset after each tick

        Returns:
            A function that removes this registration. Calling it more
            than once does nothing.

        Callbacks run with the directory lock held. A callback may
        subscribe or cancel on its own thread, but it must not block
        waiting on another thread that subscribes or cancels, or the
        two deadlock. Hand slow work off instead (for example with
        loop.call_soon_threadsafe).
        """
        subscription = _Subscription(asset_id, callback)
        with self._lock:
            self._subscriptions.setdefault(asset_id, []).append(subscription)

        def cancel() -> None:
            self._remove(subscription)

        return cancel

    def _remove(self, subscription: _Subscription) -> None:
        with self._lock:
            if not subscription.active:
                return
            subscription.active = False
            subscriptions = self._subscriptions.get(subscription.asset_id, [])
            # Identity, not equality: the same callable may be registered twice
            for i, candidate in enumerate(subscriptions):
                if candidate is subscription:
                    del subscriptions[i]
                    break
            if not subscriptions:
                self._subscriptions.pop(subscription.asset_id, None)

    def notify_all(self, asset_id: str, asset: MonitoredAsset) -> int:
        """
        Deliver a snapshot to every active callback for an asset.

        Callbacks run in registration order. An exception from one
        callback is logged and delivery continues with the next.

        Returns:
            Number of callbacks that completed without raising
        """
        delivered = 0
        with self._lock:
            for subscription in list(self._subscriptions.get(asset_id, [])):
                if not subscription.active:
                    continue
                try:
                    subscription.callback(asset)
                    delivered += 1
                except Exception:
                    logger.exception("Subscriber callback failed for asset %s", asset_id)
        return delivered

    def subscriber_count(self, asset_id: Optional[str] = None) -> int:
        """Count active subscriptions for one asset, or for all assets."""
        with self._lock:
            if asset_id is not None:
                return len(self._subscriptions.get(asset_id, []))
            return sum(len(subs) for subs in self._subscriptions.values())
