from gameui.core.event_listener import EventListener
from gameui.core.ui_event import UIEvent, UIEventType
from tests.test_utils import EventCollector


def test_type_filtered_subscription():
    hub = EventListener()
    collector = EventCollector()
    hub.subscribe(collector.on_event, [UIEventType.DIALOG_OPENED])
    hub.publish(UIEvent(UIEventType.DIALOG_CLOSED))
    hub.publish(UIEvent(UIEventType.DIALOG_OPENED, payload={"name": "WinMSG"}))
    assert collector.types() == [UIEventType.DIALOG_OPENED]
    assert collector.events[0].get("name") == "WinMSG"
    assert collector.events[0].get("missing", 3) == 3


def test_duplicate_subscribe_and_unsubscribe():
    hub = EventListener()
    collector = EventCollector()
    hub.subscribe(collector.on_event)
    hub.subscribe(collector.on_event)
    hub.publish(UIEvent(UIEventType.RELOAD_REQUESTED))
    assert len(collector.events) == 1
    hub.unsubscribe(collector.on_event)
    hub.publish(UIEvent(UIEventType.RELOAD_REQUESTED))
    assert len(collector.events) == 1


def test_events_published_during_dispatch_are_queued():
    hub = EventListener()
    order = []
    def first(ev):
        order.append(ev.type)
        if ev.type == UIEventType.DIALOG_OPENED:
            hub.publish(UIEvent(UIEventType.DIALOG_CLOSED))
    def second(ev):
        order.append(("second", ev.type))
    hub.subscribe(first)
    hub.subscribe(second)
    hub.publish(UIEvent(UIEventType.DIALOG_OPENED))
    assert order == [
        UIEventType.DIALOG_OPENED,
        ("second", UIEventType.DIALOG_OPENED),
        UIEventType.DIALOG_CLOSED,
        ("second", UIEventType.DIALOG_CLOSED),
    ]


def test_failing_subscriber_is_logged_and_isolated(caplog):
    hub = EventListener()
    collector = EventCollector()
    def broken(ev):
        raise RuntimeError("subscriber failed")
    hub.subscribe(broken)
    hub.subscribe(collector.on_event)
    hub.publish(UIEvent(UIEventType.COMPONENTS_CLEARED))
    assert collector.types() == [UIEventType.COMPONENTS_CLEARED]
    assert "Subscriber" in caplog.text


def test_filtered_and_unfiltered_callbacks_run_in_subscription_order():
    hub = EventListener()
    order = []
    hub.subscribe(lambda ev: order.append("dialogs"), [UIEventType.DIALOG_OPENED, UIEventType.DIALOG_CLOSED])
    hub.subscribe(lambda ev: order.append("all"))
    hub.publish(UIEvent(UIEventType.DIALOG_OPENED))
    hub.publish(UIEvent(UIEventType.RELOAD_REQUESTED))
    assert order == ["dialogs", "all", "all"]


def test_subscribing_again_widens_the_filter():
    hub = EventListener()
    collector = EventCollector()
    hub.subscribe(collector.on_event, [UIEventType.DIALOG_OPENED])
    hub.subscribe(collector.on_event, [UIEventType.DIALOG_CLOSED])
    hub.publish(UIEvent(UIEventType.DIALOG_OPENED))
    hub.publish(UIEvent(UIEventType.DIALOG_CLOSED))
    hub.publish(UIEvent(UIEventType.RELOAD_REQUESTED))
    assert collector.types() == [UIEventType.DIALOG_OPENED, UIEventType.DIALOG_CLOSED]
