from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional, Sequence

from PySide6.QtCore import QDate, QDateTime, QTime
from PySide6.QtWidgets import QComboBox, QDateTimeEdit, QTextEdit, QWidget

from clinicsys.app.application.listados import NOMBRE_NO_DISPONIBLE
from clinicsys.app.domain import Cita, Medico, Paciente
from clinicsys.app.domain.enums import EstadoCita
from clinicsys.app.i18n import I18nManager
from clinicsys.app.pages.shared.form_dialog import FormularioEntidadDialog, required_label


class CitaFormDialog(FormularioEntidadDialog):
    """El estado solo se edita en citas existentes; las nuevas nacen Agendadas."""

    def __init__(
        self,
        i18n: I18nManager,
        pacientes: Sequence[Paciente],
        medicos: Sequence[Medico],
        cita: Optional[Cita] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(i18n, i18n.t("citas.editar" if cita else "citas.nuevo"), parent)
        self._cita_id: Optional[str] = None

        self.cbo_paciente = QComboBox()
        self.cbo_paciente.addItem(i18n.t("citas.seleccione_paciente"), "")
        for paciente in pacientes:
            self.cbo_paciente.addItem(paciente.nombre_completo, paciente.id)

        self.cbo_medico = QComboBox()
        self.cbo_medico.addItem(i18n.t("citas.seleccione_medico"), "")
        for medico in medicos:
            self.cbo_medico.addItem(f"{medico.nombre_completo} - {medico.especialidad}", medico.id)

        self.dt_fecha_hora = QDateTimeEdit()
        self.dt_fecha_hora.setDisplayFormat("dd/MM/yyyy HH:mm")
        self.dt_fecha_hora.setCalendarPopup(True)
        proxima_hora = datetime.now().replace(minute=0, second=0, microsecond=0) + timedelta(hours=1)
        self.dt_fecha_hora.setDateTime(_a_qdatetime(proxima_hora))

        self.cbo_estado = QComboBox()
        for estado in EstadoCita:
            self.cbo_estado.addItem(estado.value, estado)

        self.txt_notas = QTextEdit()
        self.txt_notas.setPlaceholderText(i18n.t("form.notas"))

        self.form.addRow(required_label(i18n.t("form.paciente")), self.cbo_paciente)
        self.form.addRow(required_label(i18n.t("form.medico")), self.cbo_medico)
        self.form.addRow(required_label(i18n.t("form.fecha_hora")), self.dt_fecha_hora)
        self.form.addRow(i18n.t("form.estado"), self.cbo_estado)
        self.form.addRow(i18n.t("form.notas"), self.txt_notas)
        self.cbo_estado.setVisible(cita is not None)
        self.form.labelForField(self.cbo_estado).setVisible(cita is not None)

        if cita is not None:
            self.set_cita(cita)

    def set_cita(self, cita: Cita) -> None:
        self._cita_id = cita.id
        _seleccionar_id(self.cbo_paciente, cita.paciente_id)
        _seleccionar_id(self.cbo_medico, cita.medico_id)
        if cita.fecha_hora is not None:
            self.dt_fecha_hora.setDateTime(_a_qdatetime(cita.fecha_hora.astimezone()))
        self.cbo_estado.setCurrentIndex(self.cbo_estado.findData(cita.estado))
        self.txt_notas.setPlainText(cita.notas or "")

    def _construir(self) -> Cita:
        return Cita(
            id=self._cita_id,
            paciente_id=self.cbo_paciente.currentData() or "",
            medico_id=self.cbo_medico.currentData() or "",
            # Sin zona: se interpreta como hora local al validar.
            fecha_hora=self.dt_fecha_hora.dateTime().toPython(),
            estado=self.cbo_estado.currentData() if self._cita_id else EstadoCita.AGENDADA,
            notas=self.txt_notas.toPlainText(),
        )

    def _campos_por_error(self) -> dict[str, QWidget]:
        return {"paciente_id": self.cbo_paciente, "medico_id": self.cbo_medico, "fecha_hora": self.dt_fecha_hora}


def _seleccionar_id(combo: QComboBox, entidad_id: str) -> None:
    index = combo.findData(entidad_id)
    if index < 0:
        # Referencia colgante: se conserva el id para no perderlo al guardar.
        combo.addItem(NOMBRE_NO_DISPONIBLE, entidad_id)
        index = combo.count() - 1
    combo.setCurrentIndex(index)


def _a_qdatetime(value: datetime) -> QDateTime:
    return QDateTime(QDate(value.year, value.month, value.day), QTime(value.hour, value.minute))
