from taurus.notify.model import (
    Attachment,
    AttachmentKind,
    Format,
    Notification,
    Result,
    Sender,
)


class FakeSender:
    def __init__(self):
        self.got = None

    def send(self, notification):
        self.got = notification
        return Result(provider="fake", message_ids=["1"], raw=b"ok")


def test_notification_sender_contract():
    sender = FakeSender()
    notification = Notification(
        title="title",
        body="body",
        silent=True,
        protect_content=True,
        attachments=[
            Attachment(
                kind=AttachmentKind.DOCUMENT,
                name="file.txt",
                mime="text/plain",
                content=b"payload",
            )
        ],
    )
    assert isinstance(sender, Sender)
    result = sender.send(notification)
    assert result.provider == "fake"
    assert result.message_ids == ["1"]
    assert result.raw == b"ok"
    assert sender.got is notification
    assert notification.format == Format.PLAIN
    assert notification.format == ""


def test_enum_values_render_as_text():
    assert str(Format.MARKDOWN_V2) == "MarkdownV2"
    assert str(Format.HTML) == "HTML"
    assert str(AttachmentKind.ANIMATION) == "animation"
    assert AttachmentKind("voice") is AttachmentKind.VOICE


def test_defaults_are_independent():
    first = Notification()
    second = Notification()
    first.attachments.append(Attachment(kind=AttachmentKind.PHOTO, url="http://media.test/a.jpg"))
    assert second.attachments == []
    assert Attachment(kind=AttachmentKind.PHOTO).content is None
    assert Result(provider="x").message_ids == []