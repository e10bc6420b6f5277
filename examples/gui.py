from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox

import logging
import random

from cg2d.pipeline import triangulate
from cg2d.mesh import Tri, validate_triangles
from cg2d.export import write_vtk
from cg2d.plot import plot_triangulation

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

logger = logging.getLogger("cg2d.examples.gui")


def generate_random_points(n: int):
    """
    Генерує n випадкових точок в одиничному квадраті [0,1]^2 + його вершини,
    щоб оболонка була нормальною (опуклий квадрат).
    """
    pts = [(0, 0), (1, 0), (1, 1), (0, 1)]
    for _ in range(n):
        pts.append((random.random(), random.random()))
    return pts


def parse_points_from_text(text: str):
    """
    Парсить точки з багаторядкового тексту.
    Кожен рядок: x y або x, y.
    Повертає список (x,y) як float.
    """
    points = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue  # пропускаємо пусті строки і коментарі
        parts = line.replace(",", " ").split()
        if len(parts) != 2:
            raise ValueError(f"Рядок {lineno}: очікується 2 числа, отримано: {len(parts)}")
        try:
            x, y = map(float, parts)
        except ValueError:
            raise ValueError(f"Рядок {lineno}: не вдалось прочитати числа '{line}'") from None
        points.append((x, y))
    if len(points) < 3:
        raise ValueError("Потрібно щонайменше 3 точки для тріангуляції.")
    return points


class DelaunayApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Bowyer–Watson Delaunay")
        self.geometry("800x650")

        self.fig = None
        self.ax = None
        self.canvas = None

        self._build_widgets()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Режим вводу ---
        mode_frame = ttk.LabelFrame(main, text="Режим вводу точок")
        mode_frame.pack(fill="x", pady=5)

        self.input_mode = tk.StringVar(value="random")
        ttk.Radiobutton(
            mode_frame, text="Випадкові точки всередині квадрата",
            variable=self.input_mode, value="random", command=self._update_mode_state,
        ).grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Radiobutton(
            mode_frame, text="Ручне введення точок",
            variable=self.input_mode, value="manual", command=self._update_mode_state,
        ).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(mode_frame, text="Кількість випадкових точок:").grid(row=1, column=0, sticky="w", padx=5, pady=5)
        self.n_entry = ttk.Entry(mode_frame, width=10)
        self.n_entry.insert(0, "30")
        self.n_entry.grid(row=1, column=1, sticky="w", padx=5, pady=5)

        # --- Поле для ручного вводу ---
        manual_frame = ttk.LabelFrame(main, text="Ручне введення точок (одна точка - один рядок)")
        manual_frame.pack(fill="x", pady=5)
        self.points_text = tk.Text(manual_frame, height=5, wrap="none")
        self.points_text.pack(fill="both", expand=True, padx=5, pady=5)
        self.points_text.insert("1.0", "# Приклад:\n0 0\n1 0\n1 1\n0 1\n")

        ttk.Button(main, text="Запустити тріангуляцію", command=self.run_pipeline).pack(fill="x", pady=10)

        # --- Результати ---
        result_frame = ttk.LabelFrame(main, text="Результати")
        result_frame.pack(fill="x", pady=5)
        self.summary_var = tk.StringVar(value="—")
        self.valid_var = tk.StringVar(value="—")
        ttk.Label(result_frame, textvariable=self.summary_var).grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.valid_var).grid(row=1, column=0, sticky="w", padx=5, pady=2)

        # --- Графік ---
        plot_frame = ttk.LabelFrame(main, text="2D візуалізація")
        plot_frame.pack(fill="both", expand=True, pady=5)
        self.fig = Figure(figsize=(4, 3))
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

        self._update_mode_state()

    def _update_mode_state(self):
        state = "normal" if self.input_mode.get() == "random" else "disabled"
        self.n_entry.configure(state=state)

    def run_pipeline(self):
        if self.input_mode.get() == "random":
            try:
                n = int(self.n_entry.get())
                if n < 0:
                    raise ValueError
            except ValueError:
                messagebox.showerror("Помилка", "Кількість точок має бути невід’ємним цілим числом.")
                return
            points = generate_random_points(n)
        else:
            try:
                points = parse_points_from_text(self.points_text.get("1.0", "end"))
            except ValueError as e:
                messagebox.showerror("Помилка парсингу точок", str(e))
                return

        try:
            pts, hull, tris = triangulate(points, backend="internal")
        except ValueError as e:
            messagebox.showerror("Вироджений вхід", str(e))
            return

        triangles = [Tri(pts[a], pts[b], pts[c]) for a, b, c in tris]
        report = validate_triangles(pts, triangles)
        written = write_vtk(triangles, "triangulation.vtk")

        plot_triangulation(self.ax, pts, tris)
        self.canvas.draw()

        self.summary_var.set(f"Вершини: {len(pts)}   оболонка: {len(hull)}   трикутників: {len(tris)}")
        problems = report["bad_orientation"] or report["bad_edges"] or report["non_delaunay"]
        self.valid_var.set("Є проблеми (див. лог)" if problems else "OK")
        logger.info("VALIDATION: %s", report)

        if written:
            messagebox.showinfo("Готово", "Тріангуляція завершена.\nЗаписано triangulation.vtk")
        else:
            messagebox.showwarning("Готово", "Тріангуляція завершена, але triangulation.vtk не записано.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app = DelaunayApp()
    app.mainloop()
