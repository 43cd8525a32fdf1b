"""
ISP: after

Small, client-specific interfaces. Devices implement only what they can do,
and clients depend only on what they call.
"""

from abc import ABC, abstractmethod


class Printer(ABC):
    @abstractmethod
    def print_document(self, document: str) -> str:
        pass


class Scanner(ABC):
    @abstractmethod
    def scan(self, document: str) -> str:
        pass


class Fax(ABC):
    @abstractmethod
    def fax(self, document: str, number: str) -> str:
        pass


class OfficeMachine(Printer, Scanner, Fax):
    def print_document(self, document: str) -> str:
        return f"printed {document}"

    def scan(self, document: str) -> str:
        return f"scanned {document}"

    def fax(self, document: str, number: str) -> str:
        return f"faxed {document} to {number}"


class SimplePrinter(Printer):
    def print_document(self, document: str) -> str:
        return f"printed {document}"


def print_all(printer: Printer, documents: list[str]) -> list[str]:
    return [printer.print_document(document) for document in documents]


def demo() -> list[str]:
    lines = print_all(SimplePrinter(), ["report.pdf", "invoice.pdf"])
    lines.append(OfficeMachine().scan("contract.pdf"))
    lines.append(f"SimplePrinter has scan(): {hasattr(SimplePrinter, 'scan')}")
    return lines
