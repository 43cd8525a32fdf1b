"""
ISP: before

One fat interface for every office device. A plain printer is forced to
implement scanning and faxing, and can only refuse at runtime.
"""

from abc import ABC, abstractmethod


class MultiFunctionDevice(ABC):
    @abstractmethod
    def print_document(self, document: str) -> str:
        pass

    @abstractmethod
    def scan(self, document: str) -> str:
        pass

    @abstractmethod
    def fax(self, document: str, number: str) -> str:
        pass


class OfficeMachine(MultiFunctionDevice):
    def print_document(self, document: str) -> str:
        return f"printed {document}"

    def scan(self, document: str) -> str:
        return f"scanned {document}"

    def fax(self, document: str, number: str) -> str:
        return f"faxed {document} to {number}"


class SimplePrinter(MultiFunctionDevice):
    def print_document(self, document: str) -> str:
        return f"printed {document}"

    def scan(self, document: str) -> str:
        raise NotImplementedError("SimplePrinter cannot scan")

    def fax(self, document: str, number: str) -> str:
        raise NotImplementedError("SimplePrinter cannot fax")


def demo() -> list[str]:
    printer = SimplePrinter()
    lines = [printer.print_document("report.pdf")]
    try:
        printer.scan("report.pdf")
    except NotImplementedError as exc:
        lines.append(f"scan: NotImplementedError({exc})")
    lines.append("SimplePrinter still advertises scan() and fax()")
    return lines
