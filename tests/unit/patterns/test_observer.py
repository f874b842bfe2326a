"""Tests for the Observer demonstration."""

from pattern_catalog.patterns import observer
from pattern_catalog.patterns.observer import Observer, Subject, Subscriber


class Recorder:
    def __init__(self, name: str, log: list):
        self.name = name
        self.log = log

    def update(self, data):
        self.log.append((self.name, data))


class TestSubject:
    """Publish/subscribe ordering and fan-out."""

    def test_every_subscriber_notified_once_in_order(self):
        log: list = []
        subject = Subject()
        subject.subscribe(Recorder("first", log))
        subject.subscribe(Recorder("second", log))

        subject.notify("x")

        assert log == [("first", "x"), ("second", "x")]

    def test_duplicate_subscription_is_notified_twice(self):
        log: list = []
        recorder = Recorder("dup", log)
        subject = Subject()
        subject.subscribe(recorder)
        subject.subscribe(recorder)

        subject.notify(1)

        assert log == [("dup", 1), ("dup", 1)]

    def test_notify_without_subscribers_is_a_no_op(self):
        Subject().notify("nothing")

    def test_each_publish_reaches_all_subscribers(self):
        log: list = []
        subject = Subject()
        subject.subscribe(Recorder("only", log))

        subject.notify("a")
        subject.notify("b")

        assert log == [("only", "a"), ("only", "b")]


def test_observer_satisfies_subscriber_protocol():
    assert isinstance(Observer(), Subscriber)


def test_demo_output(capsys):
    observer.demo()

    assert capsys.readouterr().out == "Received data: Observer pattern activated\n" * 2
