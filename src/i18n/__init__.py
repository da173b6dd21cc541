# i18n: UI-Texte als Modul-Konstanten (aktuell nur pt_br)
