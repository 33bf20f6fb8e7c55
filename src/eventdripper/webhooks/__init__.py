"""Webhooks – signing, header codec and verification of incoming notifications."""
from eventdripper.webhooks.constants import HEADER_KEY, MAX_SIGNATURE_AGE, SIGNING_VERSION
from eventdripper.webhooks.header import SignedHeader, make_header, parse_header
from eventdripper.webhooks.signature import WebhookSigner, compute_signature
from eventdripper.webhooks.verifier import NotificationVerifier, construct_notification

__all__ = [
    "HEADER_KEY",
    "MAX_SIGNATURE_AGE",
    "SIGNING_VERSION",
    "NotificationVerifier",
    "SignedHeader",
    "WebhookSigner",
    "compute_signature",
    "construct_notification",
    "make_header",
    "parse_header",
]
