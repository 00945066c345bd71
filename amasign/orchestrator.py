"""Two-phase transaction submission for the Amadeus signing client."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple, Union

from .constants import Network
from .crypto.keys import PrivateKey, PublicKey, derive_keypair
from .crypto.signature import encode_signature, sign
from .exceptions import (
    AmadeusError,
    BuildRequestFailed,
    ProtocolViolation,
    RemoteRejected,
    SubmissionError,
    TransportError,
)
from .modules.transaction import TransactionModule
from .types.common import Base58Str
from .types.transaction import ContractCall, SignedTransaction, UnsignedTransaction
from .utils.validation import validate_network, validate_signing_payload

__all__ = ["SubmissionState", "Submission", "SubmissionOrchestrator"]

logger = logging.getLogger(__name__)


class SubmissionState(str, Enum):
    """Submission lifecycle states."""
    IDLE = "idle"
    AWAITING_UNSIGNED_TX = "awaiting_unsigned_tx"
    AWAITING_BROADCAST = "awaiting_broadcast"
    DONE = "done"
    FAILED = "failed"


TERMINAL_STATES = frozenset({SubmissionState.DONE, SubmissionState.FAILED})


@dataclass
class Submission:
    """
    Record of one signing session.

    Holds only public values; the private key is passed to the signing
    phase and never stored here.
    """
    call: ContractCall
    network: str = Network.MAINNET.value
    state: SubmissionState = SubmissionState.IDLE
    signer: Optional[Base58Str] = None
    unsigned: Optional[UnsignedTransaction] = None
    signature: Optional[Base58Str] = None
    result: Any = None
    error: Optional[AmadeusError] = field(default=None, repr=False)

    @property
    def is_done(self) -> bool:
        return self.state is SubmissionState.DONE

    @property
    def is_failed(self) -> bool:
        return self.state is SubmissionState.FAILED

    @property
    def is_terminal(self) -> bool:
        return self.state in TERMINAL_STATES


class SubmissionOrchestrator:
    """
    Sequences build-unsigned, sign-locally and submit-signed.

    Each remote call is attempted exactly once. Any error moves the
    submission to FAILED and is re-raised to the caller.
    """

    def __init__(self, transactions: TransactionModule) -> None:
        """
        Initialize orchestrator.

        Args:
            transactions: Transaction module bound to a provider
        """
        self._transactions = transactions
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    async def execute(
        self,
        seed: Union[bytes, str],
        submission: Submission,
    ) -> Any:
        """
        Run the whole pipeline for a submission.

        Args:
            seed: Raw seed bytes or base-58 text
            submission: Submission in IDLE state

        Returns:
            Decoded broadcast result

        Raises:
            DecodeError: If the seed cannot be decoded (no network call made)
            BuildRequestFailed: If the unsigned transaction could not be obtained
            RemoteRejected: If either response carries an error
            ProtocolViolation: If the signing payload is malformed
            TransportError: If the submit request fails
        """
        if submission.state is not SubmissionState.IDLE:
            status = "finished" if submission.is_terminal else "in progress"
            raise SubmissionError(
                f"Submission already {status} ({submission.state.value})",
                phase=submission.state.value,
            )

        private_key, public_key = self.derive(seed, submission)
        await self.build(submission, public_key)
        self.sign(submission, private_key)
        del private_key
        return await self.broadcast(submission)

    def derive(
        self,
        seed: Union[bytes, str],
        submission: Submission,
    ) -> Tuple[PrivateKey, PublicKey]:
        """Derive the signing keypair and record the signer identity."""
        try:
            private_key, public_key = derive_keypair(seed)
        except AmadeusError as e:
            self._fail(submission, e, "derive")
            raise

        submission.signer = public_key.base58()
        return private_key, public_key

    async def build(
        self,
        submission: Submission,
        public_key: PublicKey,
    ) -> UnsignedTransaction:
        """
        Request the unsigned transaction (IDLE -> AWAITING_UNSIGNED_TX).

        Raises:
            RemoteRejected: If the service reports an error
            BuildRequestFailed: On transport or protocol failure
        """
        self._expect(submission, SubmissionState.IDLE)
        submission.signer = public_key.base58()
        submission.state = SubmissionState.AWAITING_UNSIGNED_TX

        try:
            unsigned = await self._transactions.create(submission.signer, submission.call)
        except RemoteRejected as e:
            self._fail(submission, e, "build")
            raise
        except (TransportError, ProtocolViolation) as e:
            error = BuildRequestFailed(f"Building transaction failed: {e}", phase="build")
            self._fail(submission, error, "build")
            raise error from e
        except AmadeusError as e:
            self._fail(submission, e, "build")
            raise

        submission.unsigned = unsigned
        return unsigned

    def sign(self, submission: Submission, private_key: PrivateKey) -> Base58Str:
        """
        Sign the server-provided payload locally; no network I/O.

        Raises:
            DecodeError: If the payload is not valid hex
            InvalidPayloadLength: If the payload is not 32 bytes
        """
        self._expect(submission, SubmissionState.AWAITING_UNSIGNED_TX)

        try:
            payload = validate_signing_payload(submission.unsigned.signing_payload)
            signature = encode_signature(sign(private_key, payload))
        except AmadeusError as e:
            self._fail(submission, e, "sign")
            raise

        submission.signature = signature
        return signature

    async def broadcast(self, submission: Submission) -> Any:
        """
        Submit the signed transaction (AWAITING_UNSIGNED_TX -> AWAITING_BROADCAST -> DONE).

        Raises:
            RemoteRejected: If the service reports an error
            TransportError: If the request fails
        """
        self._expect(submission, SubmissionState.AWAITING_UNSIGNED_TX)
        if submission.signature is None:
            raise SubmissionError("Transaction has not been signed", phase="submit")

        signed = SignedTransaction(
            transaction=submission.unsigned.blob,
            signature=submission.signature,
            network=validate_network(submission.network),
        )
        submission.state = SubmissionState.AWAITING_BROADCAST

        try:
            result = await self._transactions.submit(signed)
        except AmadeusError as e:
            self._fail(submission, e, "submit")
            raise

        submission.result = result
        submission.state = SubmissionState.DONE
        self._logger.info(f"Submission done for signer {submission.signer}")
        return result

    def _expect(self, submission: Submission, state: SubmissionState) -> None:
        """Guard a transition."""
        if submission.state is not state:
            raise SubmissionError(
                f"Expected state {state.value}, got {submission.state.value}",
                phase=submission.state.value,
            )

    def _fail(self, submission: Submission, error: AmadeusError, phase: str) -> None:
        """Move a submission to FAILED."""
        self._logger.error(f"Submission failed during {phase}: {error}")
        submission.state = SubmissionState.FAILED
        submission.error = error
