from contactform.client.controller import ContactFormController, SubmitOutcome, bind_contact_form
from contactform.client.form import ContactForm, ToastTray

__all__ = ["ContactForm", "ContactFormController", "SubmitOutcome", "ToastTray", "bind_contact_form"]
