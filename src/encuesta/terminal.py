"""
Utilidades de terminal para el formulario interactivo.

Funciones para limpiar pantalla y capturar teclas como KeyMsg.
"""

import os
import sys

from encuesta.messages import KeyMsg


# Secuencias de escape CSI (ESC [ ...)
_CSI_KEYS = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
    "Z": "shift+tab",
    "3~": "delete",
    "1~": "home",
    "4~": "end",
    "7~": "home",
    "8~": "end",
}

# Caracteres de control
_CONTROL_KEYS = {
    "\r": "enter",
    "\n": "ctrl+j",
    "\t": "tab",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x01": "ctrl+a",
    "\x02": "ctrl+b",
    "\x03": "ctrl+c",
    "\x04": "ctrl+d",
    "\x05": "ctrl+e",
    "\x06": "ctrl+f",
    "\x0b": "ctrl+k",
    "\x0e": "ctrl+n",
    "\x10": "ctrl+p",
    "\x15": "ctrl+u",
    "\x17": "ctrl+w",
}

# Teclas especiales de Windows (prefijo b'\xe0' o b'\x00')
_WINDOWS_KEYS = {
    b'H': "up",
    b'P': "down",
    b'K': "left",
    b'M': "right",
    b'G': "home",
    b'O': "end",
    b'S': "delete",
}


def decode_key(raw: str) -> KeyMsg:
    """
    Convierte una secuencia leída de la terminal en un KeyMsg.

    Args:
        raw: Caracteres de una pulsación (incluyendo secuencias de escape)

    Returns:
        KeyMsg con el nombre de la tecla o los caracteres tipeados
    """
    if raw == "\x1b":
        return KeyMsg("esc")
    if raw.startswith("\x1b["):
        return KeyMsg(_CSI_KEYS.get(raw[2:], "esc"))
    if raw.startswith("\x1b"):
        # Alt + tecla
        rest = decode_key(raw[1:])
        return KeyMsg(f"alt+{rest.text}")
    if raw in _CONTROL_KEYS:
        return KeyMsg(_CONTROL_KEYS[raw])
    return KeyMsg("runes", raw)


def _read_escape(read) -> str:
    """Lee el resto de una secuencia de escape tras ESC."""
    second = read()
    if second != "[":
        return "\x1b" + second
    seq = ""
    while True:
        ch = read()
        seq += ch
        if ch.isalpha() or ch == "~":
            break
    return "\x1b[" + seq


def read_key() -> KeyMsg:
    """
    Captura una tecla del usuario.

    Returns:
        KeyMsg: flechas ('up', 'down', 'left', 'right'), 'enter', 'tab',
        'shift+tab', 'esc', 'backspace', combinaciones 'ctrl+x' / 'alt+x',
        o 'runes' con el caracter tipeado
    """
    if os.name == 'nt':
        # Windows
        import msvcrt
        key = msvcrt.getwch()

        if key in ('\xe0', '\x00'):  # Tecla especial (flechas)
            key2 = msvcrt.getwch().encode('latin-1')
            return KeyMsg(_WINDOWS_KEYS.get(key2, "esc"))
        return decode_key(key)
    else:
        # Unix/Linux/Mac
        import select
        import termios
        import tty

        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            key = sys.stdin.read(1)

            if key == '\x1b':  # Secuencia de escape
                ready, _, _ = select.select([sys.stdin], [], [], 0.05)
                if not ready:
                    return KeyMsg("esc")
                key = _read_escape(lambda: sys.stdin.read(1))
            return decode_key(key)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
