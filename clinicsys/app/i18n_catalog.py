from __future__ import annotations

_TRANSLATIONS = {
    "pt": {
        "app.title": "ClinicSys",
        "lang.pt": "Português",
        "lang.es": "Espanhol",
        "nav.dashboard": "Dashboard",
        "nav.pacientes": "Pacientes",
        "nav.medicos": "Médicos",
        "nav.clinicas": "Clínicas",
        "nav.citas": "Agendamentos",
        "nav.perfil": "Perfil",
        "nav.sobre": "Sobre",
        "nav.ajustes": "Configurações",
        "header.saludo": "Olá, {nombre}",
        "header.logout": "Sair",
        "login.title": "ClinicSys",
        "login.welcome": "Bem-vindo de volta!",
        "login.signup_welcome": "Crie sua conta",
        "login.nombre": "Nome Completo",
        "login.email": "Email",
        "login.password": "Senha",
        "login.confirm_password": "Confirmar Senha",
        "login.submit": "Entrar",
        "login.create": "Cadastrar",
        "login.go_signup": "Não tem uma conta? Cadastre-se",
        "login.go_login": "Já tem uma conta? Entrar",
        "login.error.required": "Preencha todos os campos.",
        "login.error.invalid": "Credenciais inválidas.",
        "login.error.mismatch": "As senhas não coincidem.",
        "comun.nuevo": "Adicionar",
        "comun.editar": "Editar",
        "comun.eliminar": "Excluir",
        "comun.guardar": "Salvar",
        "comun.cancelar": "Cancelar",
        "comun.columnas": "Colunas",
        "comun.validacion": "Validação",
        "comun.error": "Erro",
        "comun.error_inesperado": "Ocorreu um erro inesperado. Revise os dados ou consulte o log.",
        "comun.confirmar_titulo": "Confirmar Exclusão",
        "comun.confirmar_boton": "Confirmar Exclusão",
        "comun.contador": "Mostrando {mostrados} de {totales}",
        "comun.no_encontrado": "O registro não existe mais.",
        "col.nombre": "Nome",
        "col.cpf": "CPF",
        "col.cnpj": "CNPJ",
        "col.telefono": "Telefone",
        "col.email": "Email",
        "col.especialidad": "Especialidade",
        "col.crm": "CRM",
        "col.fecha_hora": "Data e Hora",
        "col.paciente": "Paciente",
        "col.medico": "Médico",
        "col.estado": "Status",
        "col.acciones": "Ações",
        "columnas.titulo": "Colunas visíveis",
        "columnas.restablecer": "Restaurar",
        "form.nombre_completo": "Nome Completo",
        "form.nombre": "Nome",
        "form.cpf": "CPF",
        "form.cnpj": "CNPJ",
        "form.fecha_nacimiento": "Data de Nascimento",
        "form.telefono": "Telefone",
        "form.email": "Email",
        "form.direccion": "Endereço",
        "form.cep": "CEP",
        "form.calle": "Rua",
        "form.numero": "Número",
        "form.complemento": "Complemento",
        "form.barrio": "Bairro",
        "form.ciudad": "Cidade",
        "form.estado_uf": "Estado",
        "form.crm": "CRM",
        "form.especialidad": "Especialidade",
        "form.disponibilidad": "Disponibilidade",
        "form.disponibilidad.agregar": "Adicionar horário",
        "form.disponibilidad.quitar": "Remover",
        "form.paciente": "Paciente",
        "form.medico": "Médico",
        "form.fecha_hora": "Data e Hora",
        "form.estado": "Status",
        "form.notas": "Notas (opcional)",
        "pacientes.buscar": "Buscar por nome ou CPF...",
        "pacientes.nuevo": "Adicionar Paciente",
        "pacientes.editar": "Editar Paciente",
        "pacientes.vacio": "Nenhum paciente encontrado.",
        "pacientes.confirmar": "Você tem certeza que deseja excluir este paciente? Esta ação não pode ser desfeita.",
        "medicos.buscar": "Buscar por nome ou especialidade...",
        "medicos.nuevo": "Adicionar Médico",
        "medicos.editar": "Editar Médico",
        "medicos.vacio": "Nenhum médico encontrado.",
        "medicos.confirmar": "Você tem certeza que deseja excluir este médico? Esta ação não pode ser desfeita.",
        "clinicas.buscar": "Buscar por nome ou CNPJ...",
        "clinicas.nuevo": "Adicionar Clínica",
        "clinicas.editar": "Editar Clínica",
        "clinicas.vacio": "Nenhuma clínica encontrada.",
        "clinicas.confirmar": "Você tem certeza que deseja excluir esta clínica? Esta ação não pode ser desfeita.",
        "citas.buscar": "Buscar por paciente ou médico...",
        "citas.nuevo": "Novo Agendamento",
        "citas.editar": "Editar Agendamento",
        "citas.vacio": "Nenhum agendamento encontrado.",
        "citas.confirmar": "Você tem certeza que deseja cancelar este agendamento?",
        "citas.seleccione_paciente": "Selecione o Paciente",
        "citas.seleccione_medico": "Selecione o Médico",
        "dashboard.total_pacientes": "Total de Pacientes",
        "dashboard.total_medicos": "Total de Médicos",
        "dashboard.proximas": "Agendamentos Próximos",
        "dashboard.tabla_titulo": "Próximos Agendamentos",
        "dashboard.vacio": "Nenhum agendamento próximo.",
        "perfil.detalles": "Detalhes do Perfil",
        "perfil.guardar": "Salvar Alterações",
        "perfil.ok": "Perfil atualizado com sucesso!",
        "perfil.cambiar_password": "Alterar Senha",
        "perfil.password_actual": "Senha Atual",
        "perfil.password_nueva": "Nova Senha",
        "perfil.password_confirmar": "Confirmar Nova Senha",
        "perfil.password_ok": "Senha alterada com sucesso!",
        "perfil.password_incorrecta": "Senha atual incorreta.",
        "ajustes.apariencia": "Aparência",
        "ajustes.apariencia.desc": "Personalize a aparência do aplicativo para sua preferência.",
        "ajustes.modo_oscuro": "Modo Escuro",
        "ajustes.notificaciones": "Notificações",
        "ajustes.notificaciones.desc": "Receba alertas sobre seus agendamentos e outras atividades.",
        "ajustes.notificaciones.activar": "Ativar Notificações",
        "ajustes.idioma": "Idioma",
        "sobre.titulo": "Sobre o ClinicSys",
        "sobre.intro": (
            "O ClinicSys é uma solução moderna e intuitiva para a gestão completa de clínicas e "
            "consultórios médicos. Nosso sistema foi projetado para simplificar o dia a dia de "
            "profissionais de saúde e equipes administrativas, centralizando informações e otimizando processos."
        ),
        "sobre.funcionalidades": "Funcionalidades",
        "sobre.f.pacientes": "Gestão de Pacientes: cadastre e gerencie as informações de contato dos seus pacientes.",
        "sobre.f.medicos": "Gestão de Médicos: organize os perfis dos profissionais, suas especialidades e horários de atendimento.",
        "sobre.f.clinicas": "Gestão de Clínicas: administre múltiplas unidades ou hospitais, centralizando a operação.",
        "sobre.f.citas": "Agendamento: marque, visualize, reagende e cancele consultas com facilidade.",
        "sobre.f.tema": "Interface Personalizável: alterne entre os modos claro e escuro.",
        "sobre.f.acceso": "Controle de Acesso: autenticação para proteger os dados da sessão.",
    },
    "es": {
        "app.title": "ClinicSys",
        "lang.pt": "Portugués",
        "lang.es": "Español",
        "nav.dashboard": "Panel",
        "nav.pacientes": "Pacientes",
        "nav.medicos": "Médicos",
        "nav.clinicas": "Clínicas",
        "nav.citas": "Citas",
        "nav.perfil": "Perfil",
        "nav.sobre": "Acerca de",
        "nav.ajustes": "Configuración",
        "header.saludo": "Hola, {nombre}",
        "header.logout": "Salir",
        "login.title": "ClinicSys",
        "login.welcome": "¡Bienvenido de nuevo!",
        "login.signup_welcome": "Crea tu cuenta",
        "login.nombre": "Nombre completo",
        "login.email": "Email",
        "login.password": "Contraseña",
        "login.confirm_password": "Confirmar contraseña",
        "login.submit": "Entrar",
        "login.create": "Registrarse",
        "login.go_signup": "¿No tienes cuenta? Regístrate",
        "login.go_login": "¿Ya tienes cuenta? Entra",
        "login.error.required": "Completa todos los campos.",
        "login.error.invalid": "Credenciales inválidas.",
        "login.error.mismatch": "Las contraseñas no coinciden.",
        "comun.nuevo": "Nuevo",
        "comun.editar": "Editar",
        "comun.eliminar": "Eliminar",
        "comun.guardar": "Guardar",
        "comun.cancelar": "Cancelar",
        "comun.columnas": "Columnas",
        "comun.validacion": "Validación",
        "comun.error": "Error",
        "comun.error_inesperado": "Ha ocurrido un error inesperado. Revisa los datos o consulta el log.",
        "comun.confirmar_titulo": "Confirmar eliminación",
        "comun.confirmar_boton": "Confirmar eliminación",
        "comun.contador": "Mostrando {mostrados} de {totales}",
        "comun.no_encontrado": "El registro ya no existe.",
        "col.nombre": "Nombre",
        "col.cpf": "CPF",
        "col.cnpj": "CNPJ",
        "col.telefono": "Teléfono",
        "col.email": "Email",
        "col.especialidad": "Especialidad",
        "col.crm": "CRM",
        "col.fecha_hora": "Fecha y hora",
        "col.paciente": "Paciente",
        "col.medico": "Médico",
        "col.estado": "Estado",
        "col.acciones": "Acciones",
        "columnas.titulo": "Columnas visibles",
        "columnas.restablecer": "Restablecer",
        "form.nombre_completo": "Nombre completo",
        "form.nombre": "Nombre",
        "form.cpf": "CPF",
        "form.cnpj": "CNPJ",
        "form.fecha_nacimiento": "Fecha de nacimiento",
        "form.telefono": "Teléfono",
        "form.email": "Email",
        "form.direccion": "Dirección",
        "form.cep": "CEP",
        "form.calle": "Calle",
        "form.numero": "Número",
        "form.complemento": "Complemento",
        "form.barrio": "Barrio",
        "form.ciudad": "Ciudad",
        "form.estado_uf": "Estado",
        "form.crm": "CRM",
        "form.especialidad": "Especialidad",
        "form.disponibilidad": "Disponibilidad",
        "form.disponibilidad.agregar": "Añadir franja",
        "form.disponibilidad.quitar": "Quitar",
        "form.paciente": "Paciente",
        "form.medico": "Médico",
        "form.fecha_hora": "Fecha y hora",
        "form.estado": "Estado",
        "form.notas": "Notas (opcional)",
        "pacientes.buscar": "Buscar por nombre o CPF...",
        "pacientes.nuevo": "Nuevo paciente",
        "pacientes.editar": "Editar paciente",
        "pacientes.vacio": "No se encontraron pacientes.",
        "pacientes.confirmar": "¿Seguro que deseas eliminar este paciente? Esta acción no se puede deshacer.",
        "medicos.buscar": "Buscar por nombre o especialidad...",
        "medicos.nuevo": "Nuevo médico",
        "medicos.editar": "Editar médico",
        "medicos.vacio": "No se encontraron médicos.",
        "medicos.confirmar": "¿Seguro que deseas eliminar este médico? Esta acción no se puede deshacer.",
        "clinicas.buscar": "Buscar por nombre o CNPJ...",
        "clinicas.nuevo": "Nueva clínica",
        "clinicas.editar": "Editar clínica",
        "clinicas.vacio": "No se encontraron clínicas.",
        "clinicas.confirmar": "¿Seguro que deseas eliminar esta clínica? Esta acción no se puede deshacer.",
        "citas.buscar": "Buscar por paciente o médico...",
        "citas.nuevo": "Nueva cita",
        "citas.editar": "Editar cita",
        "citas.vacio": "No se encontraron citas.",
        "citas.confirmar": "¿Seguro que deseas cancelar esta cita?",
        "citas.seleccione_paciente": "Selecciona el paciente",
        "citas.seleccione_medico": "Selecciona el médico",
        "dashboard.total_pacientes": "Total de pacientes",
        "dashboard.total_medicos": "Total de médicos",
        "dashboard.proximas": "Próximas citas",
        "dashboard.tabla_titulo": "Próximas citas",
        "dashboard.vacio": "No hay citas próximas.",
        "perfil.detalles": "Detalles del perfil",
        "perfil.guardar": "Guardar cambios",
        "perfil.ok": "Perfil actualizado.",
        "perfil.cambiar_password": "Cambiar contraseña",
        "perfil.password_actual": "Contraseña actual",
        "perfil.password_nueva": "Nueva contraseña",
        "perfil.password_confirmar": "Confirmar nueva contraseña",
        "perfil.password_ok": "Contraseña cambiada.",
        "perfil.password_incorrecta": "La contraseña actual no es correcta.",
        "ajustes.apariencia": "Apariencia",
        "ajustes.apariencia.desc": "Personaliza la apariencia de la aplicación.",
        "ajustes.modo_oscuro": "Modo oscuro",
        "ajustes.notificaciones": "Notificaciones",
        "ajustes.notificaciones.desc": "Recibe avisos sobre tus citas y otras actividades.",
        "ajustes.notificaciones.activar": "Activar notificaciones",
        "ajustes.idioma": "Idioma",
        "sobre.titulo": "Acerca de ClinicSys",
        "sobre.intro": (
            "ClinicSys es una solución para la gestión de clínicas y consultas médicas: centraliza la "
            "información de pacientes, médicos, clínicas y citas para el personal sanitario y administrativo."
        ),
        "sobre.funcionalidades": "Funcionalidades",
        "sobre.f.pacientes": "Gestión de pacientes: alta y mantenimiento de datos de contacto.",
        "sobre.f.medicos": "Gestión de médicos: perfiles, especialidades y horarios de atención.",
        "sobre.f.clinicas": "Gestión de clínicas: varias sedes u hospitales desde un solo sitio.",
        "sobre.f.citas": "Agenda: crea, consulta, reprograma y cancela citas.",
        "sobre.f.tema": "Interfaz personalizable: modo claro y oscuro.",
        "sobre.f.acceso": "Control de acceso: autenticación para proteger los datos de la sesión.",
    },
}
